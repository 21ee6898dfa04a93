"""Schema builders.

One builder per contract family:
    - api: HTTP-style endpoints (path and param serialization)
    - command: CLI-style commands (flag serialization)
    - document: persisted documents (id and timestamp augmentation)
"""

from kmschema.service import api, command, document

__all__ = ["api", "command", "document"]
