# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Error definitions for Clappers.

Only configuration can fail. Once a registry is built, scanning a token list
always succeeds: unknown names, missing values and empty leftovers are normal
outcomes, not errors.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_DUP_DECLARATION = "E_DUP_DECLARATION"
E_INVALID_DECLARATION = "E_INVALID_DECLARATION"
E_REGISTRY_FROZEN = "E_REGISTRY_FROZEN"
E_CONFIG = "E_CONFIG"


@dataclass
class ClappersError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class DuplicateDeclarationError(ClappersError):
    pass


class InvalidDeclarationError(ClappersError):
    pass


class RegistryFrozenError(ClappersError):
    pass


class ConfigError(ClappersError):
    pass


def duplicate_declaration(
    spelling: str, existing_key: str, existing_kind: str, declaration: str
) -> DuplicateDeclarationError:
    return DuplicateDeclarationError(
        code=E_DUP_DECLARATION,
        message=(
            f"'{spelling}' in '{declaration}' is already declared"
            f" as {existing_kind} '{existing_key}'"
        ),
        context={
            "spelling": spelling,
            "declaration": declaration,
            "existing_key": existing_key,
            "existing_kind": existing_kind,
        },
    )


def invalid_declaration(
    declaration: str, reason: str
) -> InvalidDeclarationError:
    return InvalidDeclarationError(
        code=E_INVALID_DECLARATION,
        message=f"invalid declaration '{declaration}': {reason}",
        context={"declaration": declaration},
    )


def registry_frozen(declaration: str) -> RegistryFrozenError:
    return RegistryFrozenError(
        code=E_REGISTRY_FROZEN,
        message=f"cannot declare '{declaration}' after parsing has started",
        context={"declaration": declaration},
    )


def config_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> ConfigError:
    return ConfigError(code=E_CONFIG, message=message, context=context)


__all__ = [
    "ClappersError",
    "DuplicateDeclarationError",
    "InvalidDeclarationError",
    "RegistryFrozenError",
    "ConfigError",
    "duplicate_declaration",
    "invalid_declaration",
    "registry_frozen",
    "config_error",
    "E_DUP_DECLARATION",
    "E_INVALID_DECLARATION",
    "E_REGISTRY_FROZEN",
    "E_CONFIG",
]
