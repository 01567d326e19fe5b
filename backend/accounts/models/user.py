from enum import IntEnum

from pydantic import BaseModel
from sqlalchemy import Column, String
from sqlmodel import Field, SQLModel


class Role(IntEnum):
    STUDENT = 0
    ADMIN = 1


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=255, unique=True, index=True)
    roll_number: str | None = Field(default=None, max_length=32)
    gender: str | None = Field(default=None, max_length=32)
    email: str | None = Field(default=None, max_length=255)
    phone_number: str | None = Field(default=None, max_length=32)
    # bcrypt hash, never the plaintext
    password_hash: str = Field(sa_column=Column("password", String(255), nullable=False))
    role: int = Field(default=Role.STUDENT.value)


class UserProfile(BaseModel):
    id: int
    username: str
    roll_number: str | None = None
    gender: str | None = None
    email: str | None = None
    phone_number: str | None = None
    role: int

    model_config = {"from_attributes": True}


class PublicUser(BaseModel):
    id: int
    username: str
    role: int
