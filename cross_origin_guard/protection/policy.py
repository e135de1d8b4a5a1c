from __future__ import annotations

import re
import threading
from typing import Any, Optional

from cross_origin_guard.protection.exceptions import InvalidConfiguration
from cross_origin_guard.protection.origin import Origin


class PolicyStore:
    # written at startup under the lock, read lock-free afterwards
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._trusted_origins: frozenset[str] = frozenset()
        self._bypass_patterns: tuple[str, ...] = ()
        # (patterns, compiled) pair, swapped as a whole
        self._compiled: tuple[tuple[str, ...], Optional[re.Pattern[str]]] = ((), None)

    @property
    def trusted_origins(self) -> frozenset[str]:
        return self._trusted_origins

    @property
    def bypass_patterns(self) -> tuple[str, ...]:
        return self._bypass_patterns

    def add_trusted_origin(self, origin: Any) -> str:
        """Trust requests whose Origin header exactly equals ``origin``.

        Returns the canonical ``scheme://host[:port]`` string that was stored.
        """
        canonical = str(Origin.parse(origin))
        with self._lock:
            if canonical not in self._trusted_origins:
                self._trusted_origins = self._trusted_origins | {canonical}
        return canonical

    def add_insecure_bypass_pattern(self, pattern: str) -> None:
        if not pattern:
            raise InvalidConfiguration("Regex must not be empty.")
        with self._lock:
            self._bypass_patterns = self._bypass_patterns + (pattern,)

    def compile(self) -> Optional[re.Pattern[str]]:
        """Compiled alternation of all bypass patterns, or None when there are none."""
        patterns = self._bypass_patterns
        cached_for, compiled = self._compiled
        if cached_for == patterns:
            return compiled
        if not patterns:
            return None
        try:
            compiled = re.compile("|".join(patterns), re.IGNORECASE)
        except re.error as exc:
            raise InvalidConfiguration(f"Bypass patterns do not compile: {exc}") from exc
        self._compiled = (patterns, compiled)
        return compiled

    def is_exempt(self, request_path: str, origin: str) -> bool:
        compiled = self.compile()
        if compiled is not None and compiled.search(request_path):
            return True
        if not origin:
            return False
        return origin in self._trusted_origins
