"""Mount points that receive rendered fragments.

A mount is anything with an ``append(fragment)`` method. ``MountPoint`` buffers
HTML for one element of a page, ``TextStreamMount`` writes lines to a terminal
or any other text stream, and ``Document`` is the set of mount points a page
provides, looked up by identifier.
"""

from collections.abc import Iterable
from typing import Protocol, TextIO

from markupsafe import Markup, escape

from film_views.exceptions import DuplicateMountException, MissingMountException
from film_views.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class Mount(Protocol):
    """Sink that accepts fragments in order."""

    def append(self, fragment: str) -> None:
        """Append a fragment after any previously appended content."""
        ...


class MountPoint:
    """In-memory content of one HTML container element.

    Plain strings are escaped on append; ``Markup`` passes through as-is.
    When ``child_tag`` is set every fragment is wrapped in that element,
    the way a list container wraps each line in ``<li>``.
    """

    def __init__(self, mount_id: str, child_tag: str | None = None, child_class: str | None = None):
        self.mount_id = mount_id
        self.child_tag = child_tag
        self.child_class = child_class
        self._fragments: list[Markup] = []

    def append(self, fragment: str) -> None:
        content = escape(fragment)
        if self.child_tag and self.child_class:
            content = Markup('<{0} class="{1}">{2}</{0}>').format(self.child_tag, self.child_class, content)
        elif self.child_tag:
            content = Markup("<{0}>{1}</{0}>").format(self.child_tag, content)
        self._fragments.append(content)

    @property
    def fragments(self) -> tuple[Markup, ...]:
        """Appended fragments in append order."""
        return tuple(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __html__(self) -> Markup:
        return Markup("\n").join(self._fragments)

    def __str__(self) -> str:
        return str(self.__html__())

    def __repr__(self) -> str:
        return f"MountPoint(mount_id={self.mount_id!r}, fragments={len(self._fragments)})"


class TextStreamMount:
    """Writes each fragment as one line of a text stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.count = 0

    def append(self, fragment: str) -> None:
        self.stream.write(f"{fragment}\n")
        self.count += 1


class Document:
    """The mount points one page provides, keyed by unique identifier."""

    def __init__(self, mount_points: Iterable[MountPoint] = ()):
        self._mounts: dict[str, MountPoint] = {}
        for mount_point in mount_points:
            self.add_mount(mount_point)

    def add_mount(self, mount_point: MountPoint) -> MountPoint:
        """Register a mount point.

        Raises:
            DuplicateMountException: If the identifier is already taken
        """
        if mount_point.mount_id in self._mounts:
            raise DuplicateMountException(mount_point.mount_id)
        self._mounts[mount_point.mount_id] = mount_point
        return mount_point

    def get_mount(self, mount_id: str) -> MountPoint:
        """Look up a mount point by identifier.

        Args:
            mount_id: Identifier of the container element

        Returns:
            The registered MountPoint

        Raises:
            MissingMountException: If no mount point has that identifier
        """
        mount_point = self._mounts.get(mount_id)
        if mount_point is None:
            log_with_context(
                logger,
                "warning",
                "Mount point not found",
                mount_id=mount_id,
                available=sorted(self._mounts),
                event_type="missing_mount",
            )
            raise MissingMountException(mount_id, details={"available": sorted(self._mounts)})
        return mount_point

    @property
    def mount_ids(self) -> tuple[str, ...]:
        return tuple(self._mounts)

    def __contains__(self, mount_id: object) -> bool:
        return mount_id in self._mounts
