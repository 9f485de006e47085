"""
Edit Service - Wire path admission, the edit engine and the pending-edit store

Propose with dry_run stores the batch behind a state ID; approve redeems it
and re-applies the batch against whatever the file holds at that moment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from models.edit import EditOperation, LineInfo
from services.edit_engine import EditEngine, EditResult
from services.line_info import LineInfoReader
from services.path_guard import PathGuard
from services.state_manager import PendingEditStore

logger = logging.getLogger(__name__)

APPROVE_HINT = "Use this ID with approve_edit to apply the changes."


@dataclass(frozen=True)
class ProposeResult:
    result: EditResult
    state_id: str | None = None

    @property
    def text(self) -> str:
        if self.state_id is None:
            return self.result.diff_text
        return f"{self.result.diff_text}\nState ID: {self.state_id}\n{APPROVE_HINT}"


class EditService:
    """Propose/approve orchestration over injected collaborators"""

    def __init__(
        self,
        path_guard: PathGuard,
        store: PendingEditStore,
        engine: EditEngine | None = None,
        line_reader: LineInfoReader | None = None,
    ):
        self.path_guard = path_guard
        self.store = store
        self.engine = engine if engine is not None else EditEngine()
        self.line_reader = line_reader if line_reader is not None else LineInfoReader()

    async def propose(
        self,
        path: str,
        batch: Sequence[EditOperation],
        dry_run: bool = False,
    ) -> ProposeResult:
        valid_path = await self.path_guard.validate(path)
        result = await self.engine.apply(valid_path, batch, dry_run=dry_run)
        if not dry_run:
            return ProposeResult(result=result)
        state_id = self.store.save(str(valid_path), batch)
        return ProposeResult(result=result, state_id=state_id)

    async def approve(self, state_id: str) -> EditResult:
        """Redeem a state ID.

        The ID is consumed before re-validation, so a batch that no longer fits
        the file cannot be retried with the same ID; the caller re-proposes.
        """
        pending = self.store.consume(state_id)
        # Admission may have changed since the proposal (symlink swapped in)
        valid_path = await self.path_guard.validate(pending.path)
        return await self.engine.apply(valid_path, pending.batch, dry_run=False)

    async def get_lines(
        self,
        path: str,
        line_numbers: Sequence[int],
        context: int = 0,
    ) -> dict[int, LineInfo]:
        valid_path = await self.path_guard.validate(path)
        return await self.line_reader.read(valid_path, line_numbers, context)
