"""Shared pytest fixtures for fieldrules tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from fieldrules.validation import (
    Bool,
    Email,
    FieldDeclaration,
    Length,
    MinLength,
    MinSize,
    Password,
    Required,
    declare,
)


@dataclass
class Profile:
    name: str
    city: str
    age: int
    bio: str | None
    allow: bool
    password: str
    email: str


@pytest.fixture
def profile() -> Profile:
    """Record with one failing value per interesting rule."""
    return Profile(
        name="Olamide",
        city="Nigeria",
        age=36,
        bio=None,
        allow=True,
        password="WhatAPass@003",
        email="myemail@gmailcom",
    )


@pytest.fixture
def profile_dict() -> dict[str, Any]:
    return {
        "name": "Olamide",
        "city": "Nigeria",
        "age": 36,
        "bio": None,
        "allow": True,
        "password": "WhatAPass@003",
        "email": "myemail@gmailcom",
    }


@pytest.fixture
def profile_declarations() -> list[FieldDeclaration]:
    bio = declare("bio", Required())
    bio.insert(MinLength(12), "Bio is too short!")
    return [
        declare("name", Length(12)),
        declare("age", MinSize(18), "You're under-aged!"),
        bio,
        declare("allow", Bool()),
        declare("password", Password(8), "Password is incorrect"),
        declare("email", Email()),
    ]
