"""Modele domain pour les notifications de mutation."""

import dataclasses
import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

COMPANY_CREATED = "Company created"
COMPANY_UPDATED = "Company updated"
COMPANY_DELETED = "Company deleted"


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@dataclass(frozen=True)
class Event:
    """
    Notification immuable emise apres une mutation reussie.

    Serialisee en JSON {"Message": ..., "Body": ...} avant d'etre
    confiee au publisher. Aucun accuse de reception n'est attendu.
    Les champs du Body gardent les noms snake_case des dataclasses
    (id, name, employees_amount...), comme les schemas API.
    """

    message: str
    body: Any

    def to_bytes(self) -> bytes:
        payload = {"Message": self.message, "Body": self.body}
        return json.dumps(payload, default=_json_default).encode("utf-8")
