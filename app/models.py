from sqlalchemy import false
from sqlmodel import Field, SQLModel


class TaskBase(SQLModel):
    """Base model with shared fields"""

    title: str = Field(min_length=1, max_length=200, index=True)
    description: str | None = Field(default=None)
    completed: bool = Field(default=False)


class Task(TaskBase, table=True):
    """Database model"""

    __tablename__ = "tasks"
    # ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    completed: bool = Field(default=False, sa_column_kwargs={"server_default": false()})


class TaskCreate(TaskBase):
    """Schema for creating a task"""

    pass


class TaskUpdate(TaskBase):
    """Schema for updating a task - replaces every field, no partial patch"""

    pass


class TaskResponse(TaskBase):
    """Schema for task responses"""

    id: int

    model_config = {"from_attributes": True}


class TaskStats(SQLModel):
    """Completed/pending summary over all tasks"""

    total: int
    completed: int
    pending: int
    progress: int
