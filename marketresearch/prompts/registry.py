"""template registry keyed by research mode and entity type."""

from dataclasses import dataclass
from typing import Callable, Optional

from marketresearch.errors import ValidationError

TemplateFn = Callable[[str], str]


@dataclass(frozen=True)
class PromptTemplate:
    """a registered template and the entity type it targets."""

    mode: str
    entity_type: str
    render: TemplateFn


class TemplateRegistry:
    """registry for prompt templates."""

    def __init__(self) -> None:
        self._templates: dict[tuple[str, str], PromptTemplate] = {}
        self._defaults: dict[str, str] = {}

    @property
    def modes(self) -> list[str]:
        """registered modes in registration order."""
        return list(self._defaults)

    def register(
        self, mode: str, entity_type: str, fn: TemplateFn, default: bool = False
    ) -> None:
        """registers fn for (mode, entity_type)."""
        self._templates[(mode, entity_type)] = PromptTemplate(mode, entity_type, fn)
        # first registration for a mode is its default unless overridden
        if default or mode not in self._defaults:
            self._defaults[mode] = entity_type

    def resolve(self, mode: str, entity_type: Optional[str] = None) -> PromptTemplate:
        """
        finds the template for a mode.

        Args:
            mode: research mode
            entity_type: requested entity type; ignored when the mode has no
                template for it

        Returns:
            matching PromptTemplate

        Raises:
            ValidationError: if mode is not registered
        """
        if mode not in self._defaults:
            raise ValidationError(
                f"Invalid mode: {mode}. Must be one of: {', '.join(self.modes)}"
            )
        if entity_type is None or (mode, entity_type) not in self._templates:
            entity_type = self._defaults[mode]
        return self._templates[(mode, entity_type)]


# global registry
registry = TemplateRegistry()


def template(
    mode: str,
    entity_type: str = "company",
    default: bool = False,
    target_registry: TemplateRegistry = registry,
) -> Callable[[TemplateFn], TemplateFn]:
    """
    decorator to register a prompt template function.

    Args:
        mode: research mode served by the template
        entity_type: "company" or "sector"
        default: use this template when the request names no entity type
        target_registry: registry to register with (defaults to global)

    Returns:
        decorator function
    """

    def decorator(fn: TemplateFn) -> TemplateFn:
        target_registry.register(mode, entity_type, fn, default=default)
        return fn

    return decorator
