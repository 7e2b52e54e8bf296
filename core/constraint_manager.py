import logging
from typing import Any, Callable, Optional
from core.objective import Objective

logger = logging.getLogger(__name__)


class ConstraintManager:
    """
    Registers rule functions and applies them in registration order.

    A rule is called as `rule(model, state)` and returns the `Objective` terms it
    created, or None when it only posts hard constraints.
    """

    def __init__(self, model, state: Any):
        self.model = model
        self.state = state
        self.rules: list[Callable[..., Optional[Objective]]] = []

    def add_rule(self, rule_func: Callable[..., Optional[Objective]], condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule_func)

    def apply_all(self) -> Objective:
        """Apply all registered rules in order and merge their objective contributions."""
        objective = Objective()
        for rule in self.rules:
            contribution = rule(self.model, self.state)
            if contribution is not None:
                objective = objective + contribution
            logger.debug(
                f"{rule.__name__}: {len(contribution) if contribution is not None else 0} penalty terms"
            )
        return objective
