from sqlalchemy import Column, Date, Integer, Text
from infrastructure.sqlalchemy.session.db import Base


class TaskModel(Base):
    __tablename__ = "MANAGEMENT"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(Date, nullable=True)
    status = Column(Text, nullable=True)
