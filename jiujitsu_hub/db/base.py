# /jiujitsu_hub/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic runs its auto-generation scan and when `create_all` runs at startup.

from .base_class import Base

from .models.user_models import User
from .models.academy_models import Academy, Professor, academy_assistants
from .models.graduation_models import Graduation
from .models.student_models import Student, Payment
from .models.schedule_models import ClassSchedule, AttendanceRecord, schedule_assistants
from .models.settings_models import ThemeSettings, ActivityLog, NewsArticle
