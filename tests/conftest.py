"""Shared pytest configuration and fixtures for validation tests."""

import re
from typing import Dict

import pytest

from object_validation.validation import (
    FieldConfig,
    ValidationBuilder,
    ValidationConfig,
    Validator,
)
from object_validation.validation.checks import (
    longer_than,
    not_mapping,
    not_matching,
    not_one_of,
    not_string,
    shorter_than,
)

USERNAME_REQUIRED = "You must have a username!"
USERNAME_TYPE = "Invalid username provided!"
USERNAME_TOO_LONG = "Your username cannot exceed 50 characters!"
USERNAME_TOO_SHORT = "Your username must be more than 5 characters!"
USERNAME_CHARSET = "Your username may only contain letters, underscores, and numbers!"
AVATAR_TOO_BIG = "Your avatar cannot exceed 50MB!"
COLOR_REQUIRED = "Color setting is missing!"
COLOR_CHOICE = "Color must be red, blue or green!"


def _avatar_too_big(avatar: Dict) -> bool:
    return avatar["size"] > 50


@pytest.fixture
def user_config() -> ValidationConfig:
    """Signup form configuration written directly as data."""
    return ValidationConfig(
        fields={
            "username": FieldConfig(
                type_check=Validator(not_string(), USERNAME_TYPE),
                required=True,
                required_message=USERNAME_REQUIRED,
                validators=(
                    Validator(longer_than(50), USERNAME_TOO_LONG),
                    Validator(shorter_than(5), USERNAME_TOO_SHORT),
                    Validator(not_matching(r"[a-z_1-9]+", re.IGNORECASE), USERNAME_CHARSET),
                ),
            ),
            "avatar": FieldConfig(
                required=True,
                required_message="You must have an avatar!",
                type_check=Validator(not_mapping(), "Invalid avatar provided!"),
                stop_after_first_fail=True,
                validators=(Validator(_avatar_too_big, AVATAR_TOO_BIG),),
            ),
            "settings": FieldConfig(
                type_check=Validator(not_mapping(), "Invalid settings provided!"),
                nested=ValidationConfig(
                    fields={
                        "color": FieldConfig(
                            required=True,
                            required_message=COLOR_REQUIRED,
                            validators=(
                                Validator(not_one_of(["red", "blue", "green"]), COLOR_CHOICE),
                            ),
                        )
                    }
                ),
            ),
        }
    )


@pytest.fixture
def user_builder() -> ValidationBuilder:
    """The same signup form assembled with the fluent builder."""
    return (
        ValidationBuilder()
        .add_field("username", lambda builder: builder
            .make_required(USERNAME_REQUIRED)
            .add_type_check(not_string(), USERNAME_TYPE)
            .add_validator(longer_than(50), USERNAME_TOO_LONG)
            .add_validator(shorter_than(5), USERNAME_TOO_SHORT)
            .add_validator(not_matching(r"[a-z_1-9]+", re.IGNORECASE), USERNAME_CHARSET)
        )
        .add_field("avatar", lambda builder: builder
            .add_type_check(not_mapping(), "Invalid avatar provided!")
            .add_validator(_avatar_too_big, AVATAR_TOO_BIG)
        )
        .add_field("settings", lambda builder: builder
            .add_nested_config(
                ValidationBuilder()
                .add_field("color", lambda color: color
                    .make_required(COLOR_REQUIRED)
                    .add_type_check(not_string(), "Invalid color provided!")
                    .add_validator(not_one_of(["red", "blue", "green"]), COLOR_CHOICE)
                )
            )
        )
    )


@pytest.fixture
def valid_user() -> Dict:
    return {
        "username": "Command_String",
        "avatar": {"size": 45},
        "settings": {"color": "red"},
    }


@pytest.fixture
def settings_config() -> ValidationConfig:
    """Nested settings rules plus a direct rule on the settings object itself."""
    return ValidationConfig.from_dict(
        {
            "fields": {
                "settings": {
                    "type": {"is_invalid": not_mapping(), "message": "Invalid settings provided!"},
                    "nested": {
                        "fields": {
                            "color": {
                                "validators": [
                                    {"is_invalid": not_one_of(["red", "blue", "green"]), "message": COLOR_CHOICE},
                                ]
                            },
                            "theme": {
                                "validators": [
                                    {"is_invalid": not_one_of(["light", "dark"]), "message": "Theme must be light or dark!"},
                                ]
                            },
                        }
                    },
                    "validators": [
                        {"is_invalid": lambda v: len(v) != 3, "message": "Missing settings!"},
                    ],
                }
            }
        }
    )
