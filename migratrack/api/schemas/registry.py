"""Server and database registry schemas."""

from typing import Optional

from pydantic import Field

from .base import EntitySchema


class ServerCreate(EntitySchema):
    server_name: str = Field(..., min_length=1, max_length=200)
    host_name: str = Field(..., min_length=1, max_length=200)
    server_index: str = Field(..., min_length=1, max_length=50)


class ServerUpdate(EntitySchema):
    server_id: Optional[int] = None
    server_name: Optional[str] = Field(None, min_length=1, max_length=200)
    host_name: Optional[str] = Field(None, min_length=1, max_length=200)
    server_index: Optional[str] = Field(None, min_length=1, max_length=50)


class DatabaseDetailCreate(EntitySchema):
    database_name: str = Field(..., min_length=1, max_length=200)
    server_id: int
    server_index: str = Field(..., min_length=1, max_length=50)
    client_name: str = Field(..., min_length=1, max_length=200)
    database_category: Optional[str] = Field(None, max_length=10, description="Desktop or Web")


class DatabaseDetailUpdate(EntitySchema):
    database_id: Optional[int] = None
    database_name: Optional[str] = Field(None, min_length=1, max_length=200)
    server_id: Optional[int] = None
    server_index: Optional[str] = Field(None, min_length=1, max_length=50)
    client_name: Optional[str] = Field(None, min_length=1, max_length=200)
    database_category: Optional[str] = Field(None, max_length=10)
