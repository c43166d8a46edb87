"""Child lifecycle notifier.

Explicit subscription hub between the code that owns child records and
the counter caches counting them. The owner calls ``notify_created`` after
a child is created and ``notify_destroyed`` after it is destroyed; every
counter cache subscribed for that child type is invalidated for the parent
the child's foreign key points at. Every subscription is invalidated even
when another fails; the first failure is re-raised afterwards.

For stores that cannot read a row once it is deleted, capture the foreign
keys first and fire them after the delete:

    snapshot = notifier.capture_foreign_keys("Favorite", favorite)
    await repository.delete(favorite)
    await notifier.notify_destroyed_from(snapshot)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple

from ..entities.protocols import CounterCacheHook
from ....core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Subscription:
    """A counter cache hook listening to one child type through one foreign key."""
    hook: CounterCacheHook
    foreign_key: str


class ChildLifecycleNotifier:
    """Delivers child create and destroy events to counter cache hooks."""
    
    def __init__(self):
        self._subscriptions: Dict[str, List[Subscription]] = {}
    
    def subscribe(self, child_type: str, hook: CounterCacheHook, foreign_key: str = None) -> None:
        """Subscribe a hook to lifecycle events of child_type.
        
        Args:
            child_type: Child entity type name, e.g. ``"Favorite"``
            hook: CounterCacheRegistry or CounterCache to invalidate
            foreign_key: Child field naming the parent; defaults to the
                hook's binding foreign key
        
        Raises:
            ConfigurationError: If foreign_key is omitted and the hook has
                no binding to take it from
        """
        if foreign_key is None:
            binding = getattr(hook, "binding", None)
            if binding is None:
                raise ConfigurationError(
                    f"Cannot subscribe {hook!r} to {child_type} without a foreign_key: hook has no binding"
                )
            foreign_key = binding.foreign_key
        
        self._subscriptions.setdefault(child_type, []).append(Subscription(hook, foreign_key))
        logger.debug(f"Subscribed {hook!r} to {child_type} lifecycle via {foreign_key}")
    
    def unsubscribe(self, child_type: str, hook: CounterCacheHook) -> None:
        """Remove every subscription of hook for child_type."""
        remaining = [s for s in self._subscriptions.get(child_type, []) if s.hook is not hook]
        if remaining:
            self._subscriptions[child_type] = remaining
        else:
            self._subscriptions.pop(child_type, None)
    
    def subscriptions(self, child_type: str) -> List[Subscription]:
        """Get the subscriptions for a child type."""
        return list(self._subscriptions.get(child_type, []))
    
    @staticmethod
    def read_foreign_key(child: Any, foreign_key: str) -> Any:
        """Read a foreign key value from a child object or mapping."""
        if isinstance(child, Mapping):
            return child.get(foreign_key)
        return getattr(child, foreign_key, None)
    
    def capture_foreign_keys(self, child_type: str, child: Any) -> List[Tuple[CounterCacheHook, Any]]:
        """Snapshot (hook, parent id) pairs for a child before it changes."""
        return [
            (subscription.hook, self.read_foreign_key(child, subscription.foreign_key))
            for subscription in self._subscriptions.get(child_type, [])
        ]
    
    async def notify_created(self, child_type: str, child: Any) -> None:
        """Signal that child was created."""
        await self._fire(child_type, self.capture_foreign_keys(child_type, child), "create")
    
    async def notify_destroyed(self, child_type: str, child: Any) -> None:
        """Signal that child was destroyed, reading its foreign key now."""
        await self._fire(child_type, self.capture_foreign_keys(child_type, child), "destroy")
    
    async def notify_destroyed_from(self, snapshot: List[Tuple[CounterCacheHook, Any]]) -> None:
        """Signal a destroy from foreign keys captured before deletion."""
        await self._fire(None, snapshot, "destroy")
    
    async def _fire(self, child_type: str, targets: List[Tuple[CounterCacheHook, Any]], event: str) -> None:
        """Invalidate every target, then re-raise the first failure.
        
        A failing hook never stops the remaining hooks from being invalidated.
        """
        errors: List[Exception] = []
        
        for hook, parent_id in targets:
            if parent_id is None:
                # Orphan child, no parent count to invalidate
                logger.debug(f"Skipping {event} of orphan {child_type or 'child'} for {hook!r}")
                continue
            
            try:
                await hook.on_child_mutated(parent_id)
            except Exception as e:
                logger.error(f"Failed to invalidate {hook!r} for parent {parent_id} on {event}: {e}")
                errors.append(e)
        
        if errors:
            raise errors[0]
