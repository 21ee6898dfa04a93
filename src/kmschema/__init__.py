"""kmschema - declarative contracts for endpoints, commands and documents.

kmschema describes the contract of an HTTP-style endpoint, a CLI-style command
or a persisted document as one validated, introspectable descriptor instead
of scattered hand-written types and ad-hoc string building.

Key Features:
- One builder per family (api, command, document) with configuration
  meta-validation before anything is derived
- Literal identity fields (method, auth, path, key) pinned in the derived
  request model
- Order-explicit path serialization with a shape string that always lines up
  with the value string
- Command flag serialization with a pluggable value-shape renderer
- Document variants with ObjectId and timestamp augmentation

Validation is delegated to pydantic v2.

Version: 1.0.0
"""

from kmschema.service import api, command, document

__version__ = "1.0.0"

__all__ = ["api", "command", "document", "__version__"]
