"""Tracks whether the app can be, is being, or has been installed."""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from loguru import logger

from .entities import InstallState, InstallStatus
from .errors import InstallStateError
from .store import PersistentStore

INSTALL_TRANSITIONS: Dict[InstallStatus, FrozenSet[InstallStatus]] = {
    InstallStatus.NOT_AVAILABLE: frozenset({InstallStatus.INSTALLABLE}),
    InstallStatus.INSTALLABLE: frozenset({InstallStatus.INSTALLABLE, InstallStatus.INSTALLING}),
    InstallStatus.INSTALLING: frozenset({InstallStatus.INSTALLED}),
    InstallStatus.INSTALLED: frozenset(),
}

STATUS_LABELS: Dict[InstallStatus, str] = {
    InstallStatus.NOT_AVAILABLE: "PWA: Not available",
    InstallStatus.INSTALLABLE: "PWA: Installable",
    InstallStatus.INSTALLING: "PWA: Installing...",
    InstallStatus.INSTALLED: "PWA: Installed",
}


class InstallTracker:
    """
    Install status for the running process.

    The status lives only in memory; the prompt dismissal flag is kept in the
    store so it survives restarts.
    """

    def __init__(self, store: PersistentStore, *, standalone: bool = False) -> None:
        self.store = store
        self._status = InstallStatus.INSTALLED if standalone else InstallStatus.NOT_AVAILABLE
        self._prompt_visible = False

    @property
    def status(self) -> InstallStatus:
        return self._status

    @property
    def dismissed(self) -> bool:
        return self.store.install_prompt_dismissed()

    @property
    def prompt_visible(self) -> bool:
        return self._prompt_visible

    @property
    def status_label(self) -> str:
        return STATUS_LABELS[self._status]

    def state(self) -> InstallState:
        return InstallState(status=self._status, dismissed=self.dismissed, prompt_visible=self._prompt_visible)

    def available_actions(self) -> Tuple[str, ...]:
        """Install steps a UI can offer right now, named after the tracker methods."""
        if self._status is InstallStatus.NOT_AVAILABLE:
            return ("signal_installable",)
        if self._status is InstallStatus.INSTALLABLE:
            if self._prompt_visible:
                return ("accept", "decline", "dismiss")
            return () if self.dismissed else ("signal_installable",)
        if self._status is InstallStatus.INSTALLING:
            return ("confirm_installed",)
        return ()

    def _transition(self, target: InstallStatus) -> None:
        if target not in INSTALL_TRANSITIONS[self._status]:
            raise InstallStateError(f"Invalid install transition: {self._status.value} → {target.value}")
        logger.info("Install status {} -> {}", self._status.value, target.value)
        self._status = target

    def signal_installable(self) -> bool:
        """Handle the platform's install-capability signal; return whether the prompt is shown."""
        if self._status in (InstallStatus.INSTALLING, InstallStatus.INSTALLED):
            logger.debug("Ignoring install signal while {}", self._status.value)
            return False
        self._transition(InstallStatus.INSTALLABLE)
        self._prompt_visible = not self.dismissed
        return self._prompt_visible

    def accept(self) -> None:
        self._transition(InstallStatus.INSTALLING)
        self._prompt_visible = False

    def decline(self) -> None:
        if self._status is not InstallStatus.INSTALLABLE:
            raise InstallStateError(f"Cannot decline install while {self._status.value}")
        self._transition(InstallStatus.INSTALLABLE)
        self._prompt_visible = False

    def confirm_installed(self) -> None:
        self._transition(InstallStatus.INSTALLED)

    def dismiss(self) -> None:
        """Hide the prompt for good; the install status itself is unchanged."""
        self.store.set_install_prompt_dismissed()
        self._prompt_visible = False
        logger.info("Install prompt dismissed")


__all__ = ["INSTALL_TRANSITIONS", "InstallTracker", "STATUS_LABELS"]
