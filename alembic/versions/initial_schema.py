"""Initial schema for academies, students, graduations, schedules and billing

Revision ID: 3a1c9e4f7b20
Revises:
Create Date: 2025-01-10 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a1c9e4f7b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create every table of the application."""
    op.create_table(
        'graduations',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(64), nullable=False),
        sa.Column('color', sa.String(32), nullable=True),
        sa.Column('minTimeInMonths', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('rank', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('type', sa.String(16), nullable=False, server_default='adult'),
        sa.Column('minAge', sa.Integer(), nullable=True),
        sa.Column('maxAge', sa.Integer(), nullable=True),
    )
    op.create_index('ix_graduations_id', 'graduations', ['id'])
    op.create_index('ix_graduations_rank', 'graduations', ['rank'])

    op.create_table(
        'academies',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('responsible', sa.String(255), nullable=True),
        sa.Column('responsibleRegistration', sa.String(64), nullable=True),
        sa.Column('professorId', sa.String(64), nullable=True),
        sa.Column('imageUrl', sa.String(), nullable=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
    )
    op.create_index('ix_academies_id', 'academies', ['id'])
    op.create_index('ix_academies_email', 'academies', ['email'], unique=True)

    op.create_table(
        'professors',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('registration', sa.String(64), nullable=True),
        sa.Column('cpf', sa.String(14), nullable=True),
        sa.Column('academyId', sa.String(64), nullable=True),
        sa.Column('graduationId', sa.String(64), nullable=True),
        sa.Column('imageUrl', sa.String(), nullable=True),
        sa.Column('blackBeltDate', sa.String(10), nullable=True),
    )
    op.create_index('ix_professors_id', 'professors', ['id'])
    op.create_index('ix_professors_cpf', 'professors', ['cpf'])
    op.create_index('ix_professors_academyId', 'professors', ['academyId'])

    op.create_table(
        'academy_assistants',
        sa.Column('academyId', sa.String(64), sa.ForeignKey('academies.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('professorId', sa.String(64), sa.ForeignKey('professors.id', ondelete='CASCADE'), primary_key=True),
    )

    op.create_table(
        'students',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('birthDate', sa.String(10), nullable=True),
        sa.Column('cpf', sa.String(14), nullable=False),
        sa.Column('registration', sa.String(64), nullable=True),
        sa.Column('phone', sa.String(32), nullable=True),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('beltId', sa.String(64), nullable=True),
        sa.Column('academyId', sa.String(64), nullable=True),
        sa.Column('firstGraduationDate', sa.String(10), nullable=True),
        sa.Column('lastPromotionDate', sa.String(10), nullable=True),
        sa.Column('stripes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('paymentStatus', sa.String(16), nullable=False, server_default='unpaid'),
        sa.Column('paymentDueDateDay', sa.Integer(), nullable=True),
        sa.Column('isCompetitor', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('lastCompetition', sa.String(255), nullable=True),
        sa.Column('medals', sa.JSON(), nullable=True),
        sa.Column('imageUrl', sa.String(), nullable=True),
    )
    op.create_index('ix_students_id', 'students', ['id'])
    op.create_index('ix_students_name', 'students', ['name'])
    op.create_index('ix_students_cpf', 'students', ['cpf'], unique=True)
    op.create_index('ix_students_academyId', 'students', ['academyId'])

    op.create_table(
        'payment_history',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('studentId', sa.String(64), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False, server_default='0'),
    )
    op.create_index('ix_payment_history_id', 'payment_history', ['id'])
    op.create_index('ix_payment_history_studentId', 'payment_history', ['studentId'])

    op.create_table(
        'users',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('role', sa.String(32), nullable=False),
        sa.Column('academyId', sa.String(64), nullable=True),
        sa.Column('studentId', sa.String(64), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=True, unique=True),
        sa.Column('birthDate', sa.String(10), nullable=True),
        sa.Column('refreshToken', sa.String(255), nullable=True),
        sa.Column('refreshTokenExpiresAt', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_academyId', 'users', ['academyId'])
    op.create_index('ix_users_refreshToken', 'users', ['refreshToken'])

    op.create_table(
        'class_schedules',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('className', sa.String(255), nullable=False),
        sa.Column('dayOfWeek', sa.String(32), nullable=False),
        sa.Column('startTime', sa.String(5), nullable=False),
        sa.Column('endTime', sa.String(5), nullable=False),
        sa.Column('professorId', sa.String(64), nullable=True),
        sa.Column('academyId', sa.String(64), nullable=True),
        sa.Column('requiredGraduationId', sa.String(64), nullable=True),
    )
    op.create_index('ix_class_schedules_id', 'class_schedules', ['id'])
    op.create_index('ix_class_schedules_academyId', 'class_schedules', ['academyId'])

    op.create_table(
        'schedule_assistants',
        sa.Column('scheduleId', sa.String(64), sa.ForeignKey('class_schedules.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('professorId', sa.String(64), sa.ForeignKey('professors.id', ondelete='CASCADE'), primary_key=True),
    )

    op.create_table(
        'attendance_records',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('studentId', sa.String(64), sa.ForeignKey('students.id', ondelete='CASCADE'), nullable=False),
        sa.Column('scheduleId', sa.String(64), sa.ForeignKey('class_schedules.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.String(10), nullable=False),
        sa.Column('status', sa.String(16), nullable=False),
        sa.UniqueConstraint('studentId', 'scheduleId', 'date', name='uq_attendance_student_schedule_date'),
    )
    op.create_index('ix_attendance_records_id', 'attendance_records', ['id'])
    op.create_index('ix_attendance_records_studentId', 'attendance_records', ['studentId'])
    op.create_index('ix_attendance_records_scheduleId', 'attendance_records', ['scheduleId'])

    op.create_table(
        'theme_settings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('logoUrl', sa.String(), nullable=True),
        sa.Column('systemName', sa.String(255), nullable=False),
        sa.Column('primaryColor', sa.String(16), nullable=True),
        sa.Column('secondaryColor', sa.String(16), nullable=True),
        sa.Column('backgroundColor', sa.String(16), nullable=True),
        sa.Column('cardBackgroundColor', sa.String(16), nullable=True),
        sa.Column('buttonColor', sa.String(16), nullable=True),
        sa.Column('buttonTextColor', sa.String(16), nullable=True),
        sa.Column('iconColor', sa.String(16), nullable=True),
        sa.Column('chartColor1', sa.String(16), nullable=True),
        sa.Column('chartColor2', sa.String(16), nullable=True),
        sa.Column('useGradient', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('theme', sa.String(16), nullable=False, server_default='light'),
        sa.Column('reminderDaysBeforeDue', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('overdueDaysAfterDue', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('monthlyFeeAmount', sa.Float(), nullable=False, server_default='150'),
        sa.Column('pixKey', sa.String(255), nullable=True),
        sa.Column('pixHolderName', sa.String(255), nullable=True),
        sa.Column('publicPageEnabled', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('heroHtml', sa.Text(), nullable=True),
        sa.Column('aboutHtml', sa.Text(), nullable=True),
        sa.Column('branchesHtml', sa.Text(), nullable=True),
        sa.Column('footerHtml', sa.Text(), nullable=True),
        sa.Column('customCss', sa.Text(), nullable=True),
        sa.Column('customJs', sa.Text(), nullable=True),
        sa.Column('socialLoginEnabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('googleClientId', sa.String(255), nullable=True),
        sa.Column('facebookAppId', sa.String(255), nullable=True),
        sa.Column('copyrightText', sa.String(255), nullable=True),
        sa.Column('systemVersion', sa.String(32), nullable=True),
    )

    op.create_table(
        'activity_logs',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('actorId', sa.String(64), nullable=True),
        sa.Column('action', sa.String(255), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
    )
    op.create_index('ix_activity_logs_id', 'activity_logs', ['id'])
    op.create_index('ix_activity_logs_actorId', 'activity_logs', ['actorId'])
    op.create_index('ix_activity_logs_timestamp', 'activity_logs', ['timestamp'])

    op.create_table(
        'news_articles',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('imageUrl', sa.String(), nullable=True),
        sa.Column('date', sa.String(10), nullable=True),
    )
    op.create_index('ix_news_articles_id', 'news_articles', ['id'])


def downgrade() -> None:
    """Drop every table, children first."""
    op.drop_table('news_articles')
    op.drop_table('activity_logs')
    op.drop_table('theme_settings')
    op.drop_table('attendance_records')
    op.drop_table('schedule_assistants')
    op.drop_table('class_schedules')
    op.drop_table('users')
    op.drop_table('payment_history')
    op.drop_table('students')
    op.drop_table('academy_assistants')
    op.drop_table('professors')
    op.drop_table('academies')
    op.drop_table('graduations')
