"""Remediation hints for common docker compose failures.

Rules are evaluated in order against the combined error text; the first
rule that matches produces the message. When nothing matches the raw
error is returned unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

COMPOSE_UP_COMMAND = "docker compose up --build -d"

_IMAGE_REF = re.compile(r"docker\.io/library/([^:\s/]+):([^\s:]+)")
_LEADING_NUMBER = re.compile(r"^(\d+)")


def _openjdk_suggestion(tag: str) -> str | None:
    return (
        "The openjdk image is deprecated. Try updating the Dockerfile to use:\n"
        f"  - eclipse-temurin:{tag}\n"
        f"  - amazoncorretto:{tag}\n"
        f"  - adoptopenjdk:{tag}"
    )


def _python_suggestion(tag: str) -> str | None:
    if tag.startswith("2"):
        return "Python 2 is EOL. Update to python:3.x"
    return f"Try using python:{tag}-slim or python:{tag}-alpine"


def _node_suggestion(tag: str) -> str | None:
    match = _LEADING_NUMBER.match(tag)
    if match and int(match.group(1)) < 14:
        return "This Node.js version is EOL. Use node:18 or node:20 (LTS versions)"
    return None


# Curated replacements for base images that are deprecated or end-of-life
IMAGE_SUGGESTIONS: dict[str, Callable[[str], str | None]] = {
    "openjdk": _openjdk_suggestion,
    "python": _python_suggestion,
    "node": _node_suggestion,
}


def _missing_image_message(match: re.Match[str], project_name: str) -> str:
    image, tag = match.group(1), match.group(2)
    suggest = IMAGE_SUGGESTIONS.get(image)
    suggestion = suggest(tag) if suggest else None

    if suggestion:
        return (
            f"Docker image {image}:{tag} not found.\n\n"
            f"{suggestion}\n\n"
            "To fix:\n"
            f"1. Edit the Dockerfile in projects/{project_name}/\n"
            "2. Update the FROM line to use a supported image\n"
            f"3. Re-run {COMPOSE_UP_COMMAND}"
        )
    return (
        f"Docker image {image}:{tag} not found.\n\n"
        "The base image may be deprecated or the tag doesn't exist.\n"
        f"Check Docker Hub for available tags: https://hub.docker.com/_/{image}\n\n"
        "To fix:\n"
        f"1. Edit the Dockerfile in projects/{project_name}/\n"
        "2. Update the FROM line to use a valid image tag\n"
        f"3. Re-run {COMPOSE_UP_COMMAND}"
    )


def _port_conflict_message(_match: re.Match[str], project_name: str) -> str:
    return (
        "Port conflict detected.\n\n"
        f"Another service is already using one of the ports required by {project_name}.\n\n"
        "To fix:\n"
        "1. Stop the conflicting service, or\n"
        f"2. Edit projects/{project_name}/docker-compose.yaml to use different ports"
    )


@dataclass(frozen=True)
class DiagnosticRule:
    """A pattern in compose error output and the hint it maps to.

    Attributes:
        name: Short identifier for the failure class.
        pattern: Regex searched in the error text.
        render: Builds the message from the match and the project name.
        requires: Extra substring that must also be present, if any.
    """

    name: str
    pattern: re.Pattern[str]
    render: Callable[[re.Match[str], str], str]
    requires: str | None = None

    def apply(self, error_text: str, project_name: str) -> str | None:
        if self.requires is not None and self.requires not in error_text:
            return None
        match = self.pattern.search(error_text)
        if match is None:
            return None
        return self.render(match, project_name)


COMPOSE_RULES: tuple[DiagnosticRule, ...] = (
    DiagnosticRule(
        name="port_conflict",
        pattern=re.compile(r"port is already allocated|address already in use"),
        render=_port_conflict_message,
    ),
    DiagnosticRule(
        name="missing_image",
        pattern=_IMAGE_REF,
        render=_missing_image_message,
        requires="not found",
    ),
)


def classify_compose_error(
    error_text: str,
    project_name: str,
    rules: tuple[DiagnosticRule, ...] = COMPOSE_RULES,
) -> str:
    """Turn docker compose error output into a remediation message.

    Args:
        error_text: Combined error message, stderr and stdout.
        project_name: Project the command ran for.
        rules: Ordered rules to evaluate.

    Returns:
        The first matching rule's message, or error_text unchanged.
    """
    for rule in rules:
        message = rule.apply(error_text, project_name)
        if message is not None:
            return message
    return error_text
