# /jiujitsu_hub/db/base_class.py

from sqlalchemy.ext.declarative import declarative_base

# Every ORM model in the project inherits from this single Base so that
# `Base.metadata` knows about all tables.
Base = declarative_base()
