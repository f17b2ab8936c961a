"""Template registry.

Holds templates by id. The registry is the only mutable state of the
engine; it is normally filled once at start-up and read afterwards.
"""

import logging
from typing import Iterator, Optional

from .errors import InvalidTemplateId, TemplateNotFound
from .template import Template

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Mapping of template id to Template.

    Example:
        >>> registry = TemplateRegistry()
        >>> registry.register(Template.from_theme(theme))
        >>> registry.get("toss")
    """

    def __init__(self):
        self._templates: dict[str, Template] = {}

    def register(self, template: Template) -> None:
        """Add a template, replacing any template with the same id.

        Raises:
            InvalidTemplateId: If the template id is empty or whitespace.
        """
        template_id = template.id
        if not isinstance(template_id, str) or not template_id.strip():
            raise InvalidTemplateId(f"Template id must be a non-empty string, got {template_id!r}")

        if template_id in self._templates:
            logger.warning(f"Template '{template_id}' is already registered; overwriting")
        self._templates[template_id] = template
        logger.debug(f"Registered template '{template_id}' ({template.category})")

    def unregister(self, template_id: str) -> bool:
        """Remove a template. Returns True if it was registered."""
        removed = self._templates.pop(template_id, None)
        if removed is not None:
            logger.debug(f"Unregistered template '{template_id}'")
        return removed is not None

    def get(self, template_id: str) -> Optional[Template]:
        return self._templates.get(template_id)

    def require(self, template_id: str) -> Template:
        """Like get(), but raise when the id is unknown.

        Raises:
            TemplateNotFound: Error message includes the available ids.
        """
        template = self._templates.get(template_id)
        if template is None:
            raise TemplateNotFound(template_id, self.ids())
        return template

    def has(self, template_id: str) -> bool:
        return template_id in self._templates

    def get_all(self) -> list[Template]:
        return list(self._templates.values())

    def get_free(self) -> list[Template]:
        return [t for t in self._templates.values() if t.category == "free"]

    def get_premium(self) -> list[Template]:
        return [t for t in self._templates.values() if t.category == "premium"]

    def ids(self) -> list[str]:
        return sorted(self._templates)

    def count(self) -> int:
        return len(self._templates)

    def clear(self) -> None:
        self._templates.clear()
        logger.debug("Template registry cleared")

    def describe(self) -> str:
        """Human-readable listing of registered templates."""
        lines = [f"Registered templates: {self.count()}"]
        free = self.get_free()
        premium = self.get_premium()
        lines.append(f"  Free ({len(free)}):")
        for template in free:
            lines.append(f"    - {template.id}: {template.name}")
        lines.append(f"  Premium ({len(premium)}):")
        for template in premium:
            lines.append(f"    - {template.id}: {template.name} ({template.price})")
        return "\n".join(lines)

    def log_info(self) -> None:
        for line in self.describe().splitlines():
            logger.info(line)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def __iter__(self) -> Iterator[Template]:
        return iter(list(self._templates.values()))
