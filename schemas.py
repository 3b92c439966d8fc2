import uuid
from datetime import datetime, date
from typing import Optional, Literal, List
from pydantic import BaseModel, EmailStr, ConfigDict, Field, model_validator

from enums import ProjectStatus, ProjectPriority


# =========================
# Auth
# =========================
class Token(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=8)


class UserRead(BaseModel):
    id: uuid.UUID
    name: str
    email: EmailStr
    disabled: bool
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


# =========================
# Projects
# =========================
class ProjectCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    status: ProjectStatus
    priority: ProjectPriority
    budget: Optional[float] = Field(default=None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def _end_after_start(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must be a date after or equal to start_date")
        return self


class ProjectUpdate(ProjectCreate):
    pass


class ProjectRead(BaseModel):
    id: int
    user_id: uuid.UUID
    name: str
    description: Optional[str] = None
    status: ProjectStatus
    priority: ProjectPriority
    budget: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class Option(BaseModel):
    value: str
    label: str


class ProjectOptions(BaseModel):
    statuses: List[Option]
    priorities: List[Option]


class Pagination(BaseModel):
    current_page: int
    last_page: int
    per_page: int
    total: int
    from_: Optional[int] = Field(default=None, alias="from")
    to: Optional[int] = None
    model_config = ConfigDict(populate_by_name=True)


class ProjectFiltersRead(BaseModel):
    search: str = ""
    status: str = ""
    priority: str = ""
    sort_by: str = ""
    sort_direction: Literal["asc", "desc"] = "desc"
    per_page: int = 10
    page: int = 1


class Flash(BaseModel):
    success: str


class ProjectPage(ProjectOptions):
    data: List[ProjectRead]
    pagination: Pagination
    filters: ProjectFiltersRead
    flash: Optional[Flash] = None


class ProjectDetail(ProjectOptions):
    project: ProjectRead


class ProjectMutationResult(BaseModel):
    message: str
    project: Optional[ProjectRead] = None


# =========================
# AI chat
# =========================
class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str = Field(min_length=1)


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(min_length=1)


class ChatResponse(BaseModel):
    message: ChatMessage
