"""Fire-and-forget audit emitter.

log_event() builds the AuditEvent synchronously and schedules the write.
The caller's decision has already been made and is never affected by how
the write goes:

- Inside a running event loop the write runs as a tracked task
- From a thread without a loop (sync routes in the threadpool) the write
  is submitted to the loop bound with bind_loop()
- With no loop at all the event waits in a bounded backlog until drain();
  on overflow the oldest event is dropped and audit_backlog_overflow logged
- Each write is bounded by a timeout
- Failures, timeouts and sink exceptions are logged as audit_write_failed

Usage:
    emitter.log_event(
        AuditEventType.UNAUTHORIZED_ACCESS,
        "vendor:delete",
        {"permission": "vendor:delete", "reason": "..."},
        actor=actor,
        success=False,
    )
    await emitter.drain()  # shutdown / tests
"""

import asyncio
from concurrent.futures import Future
from typing import Any

from talentgate.core.result import Failure
from talentgate.domain.entities import Actor, AuditEvent
from talentgate.domain.enums import AuditEventType
from talentgate.domain.protocols import AuditProtocol, LoggerProtocol


class AuditEmitter:
    """Schedules audit writes without blocking the caller.

    Args:
        audit: Sink the events are written to.
        logger: Structured logger for write failures.
        timeout_seconds: Upper bound for a single write.
        max_backlog: Events kept while no loop is available.
    """

    def __init__(
        self,
        audit: AuditProtocol,
        logger: LoggerProtocol,
        timeout_seconds: float = 5.0,
        max_backlog: int = 1000,
    ) -> None:
        self._audit = audit
        self._logger = logger
        self._timeout = timeout_seconds
        self._max_backlog = max_backlog
        self._loop: asyncio.AbstractEventLoop | None = None
        self._tasks: set[asyncio.Task[None]] = set()
        self._futures: set[Future[None]] = set()
        self._backlog: list[AuditEvent] = []

    @property
    def pending(self) -> int:
        """Writes scheduled but not finished."""
        return len(self._tasks) + len(self._futures) + len(self._backlog)

    def bind_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        """Loop that receives writes from threads without their own loop."""
        self._loop = loop

    def log_event(
        self,
        event_type: AuditEventType,
        action: str,
        details: dict[str, Any] | None = None,
        *,
        actor: Actor | None,
        resource_type: str | None = None,
        resource_id: str | None = None,
        success: bool = True,
        error_message: str | None = None,
    ) -> AuditEvent:
        """Build an event and schedule its write.

        Returns:
            AuditEvent: The event as it will be stored.
        """
        event = AuditEvent.create(
            event_type=event_type,
            action=action,
            actor_id=actor.id if actor is not None else None,
            actor_roles=(actor.role.value,) if actor is not None else (),
            resource_type=resource_type,
            resource_id=resource_id,
            details=details,
            success=success,
            error_message=error_message,
        )
        self._schedule(event)
        return event

    def _schedule(self, event: AuditEvent) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._submit_or_queue(event)
            return
        task = loop.create_task(self._write(event))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _submit_or_queue(self, event: AuditEvent) -> None:
        loop = self._loop
        if loop is not None and loop.is_running() and not loop.is_closed():
            future = asyncio.run_coroutine_threadsafe(self._write(event), loop)
            self._futures.add(future)
            future.add_done_callback(self._futures.discard)
            return

        if len(self._backlog) >= self._max_backlog:
            dropped = self._backlog.pop(0)
            self._logger.error(
                "audit_backlog_overflow",
                max_backlog=self._max_backlog,
                dropped_event_id=str(dropped.id),
                dropped_event_type=dropped.event_type.value,
            )
        self._backlog.append(event)

    async def _write(self, event: AuditEvent) -> None:
        context = {
            "event_id": str(event.id),
            "event_type": event.event_type.value,
            "actor_id": event.actor_id,
        }
        try:
            result = await asyncio.wait_for(
                self._audit.record(event), timeout=self._timeout
            )
        except TimeoutError:
            self._logger.error(
                "audit_write_failed",
                reason="timeout",
                timeout_seconds=self._timeout,
                **context,
            )
            return
        except Exception as e:
            self._logger.error("audit_write_failed", error=e, **context)
            return

        if isinstance(result, Failure):
            self._logger.error(
                "audit_write_failed",
                code=result.error.code.value,
                error_message=result.error.message,
                **context,
            )

    async def drain(self) -> None:
        """Wait until every scheduled write has finished."""
        while self._backlog or self._tasks or self._futures:
            backlog, self._backlog = self._backlog, []
            for event in backlog:
                await self._write(event)
            pending = [
                *self._tasks,
                *(asyncio.wrap_future(f) for f in list(self._futures)),
            ]
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
