import pytest

from sysforge.paging import PAGE_SIZE, PageEntry, PageTable, PhysAddr, VirtAddr


def test_page_size_is_4096():
    assert PAGE_SIZE == 4096
    assert VirtAddr(4096).page_number() == 1
    assert VirtAddr(4095).page_number() == 0
    assert VirtAddr(4095).page_offset() == 4095


def test_virt_addr_page_number():
    assert VirtAddr(8192).page_number() == 2


def test_virt_addr_page_offset():
    assert VirtAddr(4096 + 256).page_offset() == 256


def test_phys_addr_frame_number():
    assert PhysAddr(PAGE_SIZE * 5).frame_number() == 5


def test_virt_addr_page_arithmetic_is_consistent():
    v = VirtAddr(12345)
    assert v.page_number() * PAGE_SIZE + v.page_offset() == v.address


def test_page_aligned_address_has_zero_offset():
    assert VirtAddr(4096 * 7).page_offset() == 0


def test_address_ordering_and_equality():
    assert VirtAddr(0x1000) == VirtAddr(0x1000)
    assert VirtAddr(0x1000) < VirtAddr(0x2000)
    assert PhysAddr(0x5000) > PhysAddr(0x4FFF)


@pytest.mark.parametrize("bad", [-1, 1 << 64])
def test_address_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        VirtAddr(bad)
    with pytest.raises(ValueError):
        PhysAddr(bad)


def test_translate_preserves_offset():
    pt = PageTable()
    pt.map(VirtAddr(0x1000), PhysAddr(0x5000), True, False)
    assert pt.translate(VirtAddr(0x1ABC)) == PhysAddr(0x5ABC)


def test_translate_unmapped_is_none():
    pt = PageTable()
    assert pt.translate(VirtAddr(0xDEAD_0000)) is None


def test_map_and_unmap():
    pt = PageTable()
    virt = VirtAddr(0x2000)
    pt.map(virt, PhysAddr(0x9000), True, True)
    assert pt.is_mapped(virt)
    assert pt.unmap(virt)
    assert not pt.is_mapped(virt)
    assert pt.translate(virt) is None


def test_unmap_not_mapped_returns_false():
    pt = PageTable()
    assert pt.unmap(VirtAddr(0xFFFF_0000)) is False
    assert pt.unmap(VirtAddr(0xF000_0000)) is False


def test_remap_overwrites_previous_mapping():
    pt = PageTable()
    virt = VirtAddr(0x3000)
    pt.map(virt, PhysAddr(0x1000), True, False)
    pt.map(virt, PhysAddr(0x2000), False, False)
    assert pt.translate(VirtAddr(0x3100)) == PhysAddr(0x2100)
    assert len(pt) == 1


def test_get_entry_flags():
    pt = PageTable()
    pt.map(VirtAddr(0x4000), PhysAddr(0x8000), True, False)
    entry = pt.get_entry(VirtAddr(0x4000))
    assert entry == PageEntry(
        frame_number=PhysAddr(0x8000).frame_number(),
        present=True,
        writable=True,
        executable=False,
    )


def test_get_entry_unmapped_is_none():
    assert PageTable().get_entry(VirtAddr(0x4000)) is None


def test_multiple_independent_mappings():
    pt = PageTable()
    pt.map(VirtAddr(0x0000), PhysAddr(0xA000), True, False)
    pt.map(VirtAddr(0x1000), PhysAddr(0xB000), True, False)
    pt.map(VirtAddr(0x2000), PhysAddr(0xC000), True, False)
    assert pt.translate(VirtAddr(0x0100)) == PhysAddr(0xA100)
    assert pt.translate(VirtAddr(0x1200)) == PhysAddr(0xB200)
    assert pt.translate(VirtAddr(0x2300)) == PhysAddr(0xC300)
    assert len(pt) == 3


def test_multiple_pages_mapped_with_different_flags():
    pt = PageTable()
    pt.map(VirtAddr(0x0000), PhysAddr(0xA000), True, False)
    pt.map(VirtAddr(0x1000), PhysAddr(0xB000), False, True)
    assert pt.translate(VirtAddr(0x0000)) == PhysAddr(0xA000)
    assert pt.translate(VirtAddr(0x1000)) == PhysAddr(0xB000)
    assert pt.get_entry(VirtAddr(0x1000)).executable is True
    assert pt.get_entry(VirtAddr(0x1000)).writable is False


def test_demo_walkthrough():
    pt = PageTable()
    pt.map(VirtAddr(0 * PAGE_SIZE), PhysAddr(0xA000), True, False)
    pt.map(VirtAddr(1 * PAGE_SIZE), PhysAddr(0xB000), False, True)
    pt.map(VirtAddr(2 * PAGE_SIZE), PhysAddr(0xC000), True, True)
    assert pt.translate(VirtAddr(1 * PAGE_SIZE + 256)) == PhysAddr(0xB000 + 256)
    assert pt.unmap(VirtAddr(0))
    assert not pt.is_mapped(VirtAddr(0))
    pt.map(VirtAddr(0x1000), PhysAddr(0xF000), False, False)
    assert pt.translate(VirtAddr(0x1100)) == PhysAddr(0xF100)