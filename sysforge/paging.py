"""Virtual memory: address types and a flat single-level page table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

__all__ = ["PAGE_SIZE", "VirtAddr", "PhysAddr", "PageEntry", "PageTable"]

PAGE_SIZE = 4096

_ADDRESS_LIMIT = 1 << 64


def _check_address(address: int) -> None:
    if not 0 <= address < _ADDRESS_LIMIT:
        raise ValueError(f"address out of 64-bit range: {address:#x}")


@dataclass(frozen=True, order=True)
class VirtAddr:
    """A 64-bit virtual address."""

    address: int

    def __post_init__(self) -> None:
        _check_address(self.address)

    def page_number(self) -> int:
        """Virtual page number: address divided by the page size."""
        return self.address // PAGE_SIZE

    def page_offset(self) -> int:
        """Byte offset within the page."""
        return self.address % PAGE_SIZE


@dataclass(frozen=True, order=True)
class PhysAddr:
    """A 64-bit physical address."""

    address: int

    def __post_init__(self) -> None:
        _check_address(self.address)

    def frame_number(self) -> int:
        """Physical frame number: address divided by the page size."""
        return self.address // PAGE_SIZE


@dataclass(frozen=True)
class PageEntry:
    """Mapping of one virtual page to a physical frame, with access flags."""

    frame_number: int
    present: bool
    writable: bool
    executable: bool


class PageTable:
    """Flat page table keyed by virtual page number."""

    def __init__(self) -> None:
        self._entries: Dict[int, PageEntry] = {}

    def __len__(self) -> int:
        return sum(1 for entry in self._entries.values() if entry.present)

    def map(
        self, virt: VirtAddr, phys: PhysAddr, writable: bool, executable: bool
    ) -> None:
        """Map the page holding ``virt`` to the frame holding ``phys``.

        An existing mapping for that page is replaced.
        """
        self._entries[virt.page_number()] = PageEntry(
            frame_number=phys.frame_number(),
            present=True,
            writable=writable,
            executable=executable,
        )

    def unmap(self, virt: VirtAddr) -> bool:
        """Remove the mapping for the page holding ``virt``; True if one existed."""
        return self._entries.pop(virt.page_number(), None) is not None

    def get_entry(self, virt: VirtAddr) -> Optional[PageEntry]:
        """Return the entry for the page holding ``virt``, or None."""
        return self._entries.get(virt.page_number())

    def is_mapped(self, virt: VirtAddr) -> bool:
        """True if a present mapping exists for the page holding ``virt``."""
        entry = self.get_entry(virt)
        return entry is not None and entry.present

    def translate(self, virt: VirtAddr) -> Optional[PhysAddr]:
        """Translate ``virt`` to a physical address, keeping the page offset.

        Returns None for an unmapped page (a page fault).
        """
        entry = self.get_entry(virt)
        if entry is None or not entry.present:
            return None
        return PhysAddr(entry.frame_number * PAGE_SIZE + virt.page_offset())