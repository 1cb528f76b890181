# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""SQLAlchemy adapter: deferred queries, the repository base and engine helpers."""

from crudkit.data.relational.sqlalchemy.entity import Base
from crudkit.data.relational.sqlalchemy.queryable import SqlAlchemyQueryable
from crudkit.data.relational.sqlalchemy.repository import Repository
from crudkit.data.relational.sqlalchemy.session import (
    create_engine_from_config,
    create_schema,
    create_session_factory,
)

__all__ = [
    "Base",
    "Repository",
    "SqlAlchemyQueryable",
    "create_engine_from_config",
    "create_schema",
    "create_session_factory",
]
