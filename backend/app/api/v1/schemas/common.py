from __future__ import annotations

from typing import Annotated

from pydantic import StringConstraints

# Required text arguments: surrounding whitespace is dropped and the remainder
# must be non-empty.
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Reference to another record. Opaque: any non-empty string is accepted and
# the target does not have to exist.
ReferenceId = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
