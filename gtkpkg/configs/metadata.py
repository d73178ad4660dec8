#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# gtkpkg - Build and install GTK applications written in Rust
# Copyright (C) 2025 gtkpkg contributors
#
# This file is part of gtkpkg.
#
# gtkpkg is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# gtkpkg is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with gtkpkg.  If not, see <https://www.gnu.org/licenses/>.


"""The identity of the application that is being packaged."""

from __future__ import annotations

import enum
import os
import re
import tomllib
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from gtkpkg.configs.validation_errors import (
    AppIdFormatError,
    BinaryNameError,
    format_validation_error,
)
from gtkpkg.exceptions import ConfigError, FileOperationError
from gtkpkg.logging.logger import logger

MANIFEST_NAME = "Cargo.toml"
METADATA_SECTION = "gtkpkg"
DEFAULT_TARGET_DIR = "./target"

# three segments like io.github.Example, nothing may end with a dot
APP_ID_PATTERN = re.compile(r"^[^.\s]+\.[^.\s]+\.[^.\s]+$")


class BuildProfile(str, enum.Enum):
    """Decides where cargo puts its output, and how it compiles the binary."""

    DEBUG = "debug"
    RELEASE = "release"

    @property
    def cargo_flags(self) -> List[str]:
        # cargo install builds in release mode unless told otherwise
        if self == BuildProfile.DEBUG:
            return ["--debug"]

        return []


class ProjectMetadata(BaseModel):
    """Everything downstream steps need to know about the project.

    Read once from Cargo.toml at start and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    app_id: str
    binary: str
    name: str
    version: str
    target_dir: str

    @property
    def gettext_domain(self) -> str:
        return self.binary

    @property
    def gresource_id(self) -> str:
        """For example io/github/Example."""
        return self.app_id.replace(".", "/")

    def output_dir(self, profile: BuildProfile) -> str:
        """Where the expanded data files and the generated config.rs go."""
        return os.path.join(self.target_dir, profile.value, "data")

    def template_variables(self) -> Dict[str, str]:
        """The tokens that are replaced in .in files."""
        return {
            "@APP_ID@": self.app_id,
            "@APP_NAME@": self.name,
            "@APP_VERSION@": self.version,
            "@APP_BINARY@": self.binary,
            "@GETTEXT_DOMAIN@": self.gettext_domain,
            "@GRESOURCE_ID@": self.gresource_id,
        }

    @classmethod
    def from_manifest(
        cls,
        manifest_path: str,
        environ: Optional[Mapping[str, str]] = None,
    ) -> ProjectMetadata:
        """Read the metadata from a Cargo.toml.

        Parameters
        ----------
        manifest_path
            Path to the Cargo.toml of the project
        environ
            Used to look up CARGO_TARGET_DIR. Defaults to os.environ
        """
        if environ is None:
            environ = os.environ

        manifest = _load_manifest(manifest_path)

        package = manifest.get("package")
        if not isinstance(package, dict):
            raise ConfigError(f"No [package] in {manifest_path}!")

        pkg_metadata = _get_table(package, "metadata", "package").get(
            METADATA_SECTION
        )
        if not isinstance(pkg_metadata, dict):
            raise ConfigError(
                f"No [package.metadata.{METADATA_SECTION}] in {manifest_path}!"
            )

        app_id = _get_string(pkg_metadata, "id", f"package.metadata.{METADATA_SECTION}")
        name = _get_string(pkg_metadata, "name", f"package.metadata.{METADATA_SECTION}")
        binary = _get_string(package, "name", "package")
        version = _get_string(package, "version", "package")

        # CARGO_TARGET_DIR wins over the manifest, like it does for cargo
        target_dir = environ.get("CARGO_TARGET_DIR")
        if not target_dir:
            target_dir = _get_table(manifest, "build", "").get("target-dir")
            if target_dir is not None and not isinstance(target_dir, str):
                raise ConfigError(
                    f"[build.target-dir] in {manifest_path} is not a string!"
                )
        if not target_dir:
            target_dir = DEFAULT_TARGET_DIR

        if not os.path.isabs(target_dir):
            project_root = os.path.dirname(os.path.abspath(manifest_path))
            target_dir = os.path.normpath(os.path.join(project_root, target_dir))

        metadata = cls(
            app_id=app_id,
            binary=binary,
            name=name,
            version=version,
            target_dir=target_dir,
        )
        logger.debug("Resolved %s", metadata)
        return metadata


class NewProject(BaseModel):
    """The values a user provides to create a new project."""

    model_config = ConfigDict(frozen=True)

    app_id: str
    name: str
    binary: str

    @field_validator("app_id")
    @classmethod
    def validate_app_id(cls, app_id: str) -> str:
        if not APP_ID_PATTERN.match(app_id):
            raise AppIdFormatError(app_id)

        return app_id

    @field_validator("binary")
    @classmethod
    def validate_binary(cls, binary: str) -> str:
        if not binary or "/" in binary or binary.startswith("-"):
            raise BinaryNameError(binary)

        return binary

    @classmethod
    def create(cls, app_id: str, name: str, binary: str) -> NewProject:
        try:
            return cls(app_id=app_id, name=name, binary=binary)
        except ValidationError as error:
            raise ConfigError(format_validation_error(error)) from error


def _load_manifest(manifest_path: str) -> Dict[str, Any]:
    try:
        with open(manifest_path, "rb") as file:
            return tomllib.load(file)
    except FileNotFoundError as error:
        raise ConfigError(f"Could not find {manifest_path}!") from error
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as error:
        raise ConfigError(f"Error parsing {manifest_path}: {error}") from error
    except OSError as error:
        raise FileOperationError("read", manifest_path, error) from error


def _get_string(table: Dict[str, Any], key: str, table_name: str) -> str:
    value = table.get(key)
    if not isinstance(value, str) or value == "":
        raise ConfigError(f"No [{table_name}.{key}] in {MANIFEST_NAME}!")

    return value


def _get_table(table: Dict[str, Any], key: str, table_name: str) -> Dict[str, Any]:
    """An optional sub-table, empty if it is missing."""
    value = table.get(key)
    if value is None:
        return {}

    if not isinstance(value, dict):
        name = f"{table_name}.{key}" if table_name else key
        raise ConfigError(f"[{name}] in {MANIFEST_NAME} is not a table!")

    return value
