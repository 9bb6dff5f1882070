"""
Qualification (query) parser for bridge requests.

Queries may reference request parameters with placeholders of the form
``<%=parameter["Name"]%>``. The parser replaces each placeholder with the
matching parameter value. Placeholders naming a parameter that was not
supplied are left in the query verbatim.
"""

import re
import logging
from typing import Mapping, Optional

from bridgemock.core.errors import TemplateError

logger = logging.getLogger(__name__)


class QualificationParser:
    """Resolve parameter placeholders inside a query template."""

    OPEN_TOKEN = "<%="
    CLOSE_TOKEN = "%>"

    # parameter["Name"] or parameter['Name']
    PARAMETER_PATTERN = re.compile(r"""^\s*parameter\s*\[\s*(["'])(?P<name>.*?)\1\s*\]\s*$""")

    def parse(self, template: Optional[str], parameters: Optional[Mapping[str, str]] = None) -> str:
        """
        Substitute parameter placeholders in *template*.

        Args:
            template: The raw query, may be None or empty
            parameters: Placeholder name to value mapping

        Returns:
            The resolved query

        Raises:
            TemplateError: If a placeholder is unterminated or is not a
                parameter reference
        """
        if not template:
            return template or ""
        parameters = parameters or {}

        parts = []
        position = 0
        while True:
            start = template.find(self.OPEN_TOKEN, position)
            if start == -1:
                parts.append(template[position:])
                break
            end = template.find(self.CLOSE_TOKEN, start + len(self.OPEN_TOKEN))
            if end == -1:
                raise TemplateError(
                    f"Unterminated placeholder starting at position {start}: "
                    f"'{template[start:]}'",
                    position=start,
                )

            parts.append(template[position:start])
            placeholder = template[start:end + len(self.CLOSE_TOKEN)]
            expression = template[start + len(self.OPEN_TOKEN):end]
            parts.append(self._resolve(placeholder, expression, parameters, start))
            position = end + len(self.CLOSE_TOKEN)

        return "".join(parts)

    def _resolve(self, placeholder: str, expression: str, parameters: Mapping[str, str], position: int) -> str:
        match = self.PARAMETER_PATTERN.match(expression)
        if not match:
            raise TemplateError(
                f"Invalid placeholder '{placeholder}' at position {position}, "
                "expected parameter[\"NAME\"].",
                position=position,
            )
        name = match.group("name")
        if name not in parameters:
            logger.debug(f"No value for query parameter '{name}', leaving placeholder as-is")
            return placeholder
        value = parameters[name]
        return "" if value is None else str(value)


def substitute(template: Optional[str], parameters: Optional[Mapping[str, str]] = None) -> str:
    """Resolve *template* with a fresh QualificationParser."""
    return QualificationParser().parse(template, parameters)
