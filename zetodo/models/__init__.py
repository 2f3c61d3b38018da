"""ORM Models: SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Project is the aggregate root; columns, cards and activities are scoped by project_id

Design Decisions:
    - One file per entity for locality
    - Record suffix keeps ORM rows apart from the pydantic wire models in schemas/
"""

from zetodo.models.project import ProjectRecord  # noqa: F401
from zetodo.models.column import ColumnRecord  # noqa: F401
from zetodo.models.card import CardRecord  # noqa: F401
from zetodo.models.setting import SettingRecord  # noqa: F401
from zetodo.models.activity import ActivityRecord  # noqa: F401
from zetodo.models.schema_version import SchemaVersionRecord  # noqa: F401
