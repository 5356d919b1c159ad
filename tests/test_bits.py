import pytest

from coredrills.bits import (
    CTRL_ENABLE,
    CTRL_IRQ_EN,
    MASK32,
    REG_CTRL_OFF,
    REG_STATUS_OFF,
    STATUS_READY,
    MmioDevice,
    Permission,
    RegisterBank,
    bin32,
    clear_bit,
    clear_lowest_set_bit,
    low_mask,
    lowest_set_bit,
    pack_argb,
    parity,
    popcount,
    read_field,
    set_bit,
    test_bit as bit_is_set,
    toggle_bit,
    unpack_argb,
    write_field,
    xor_swap,
)

SAMPLES = [0, 1, 0x16, 0x155, 0x40000000, 0xFFFF0000, MASK32, 0x12345678]


def test_bin32_of_source_value():
    assert bin32(0x16) == "0" * 27 + "10110"


@pytest.mark.parametrize("value", SAMPLES)
def test_bin32_round_trip(value):
    text = bin32(value)
    assert len(text) == 32
    assert int(text, 2) == value


def test_bin32_truncates_to_32_bits():
    assert bin32(MASK32 + 1) == bin32(0)


@pytest.mark.parametrize("value", SAMPLES)
@pytest.mark.parametrize("bit", [0, 1, 2, 4, 5, 31])
def test_set_clear_toggle_relations(value, bit):
    assert bit_is_set(set_bit(value, bit), bit) is True
    assert bit_is_set(clear_bit(value, bit), bit) is False
    assert toggle_bit(toggle_bit(value, bit), bit) == value
    assert bit_is_set(toggle_bit(value, bit), bit) is not bit_is_set(value, bit)
    # Other bits are untouched.
    others = MASK32 & ~(1 << bit)
    assert set_bit(value, bit) & others == value & others
    assert clear_bit(value, bit) & others == value & others


@pytest.mark.parametrize("bit", [-1, 32])
def test_bit_position_out_of_range(bit):
    with pytest.raises(ValueError):
        set_bit(0, bit)
    with pytest.raises(ValueError):
        bit_is_set(0, bit)


def test_low_mask():
    assert low_mask(8) == 0xFF
    assert low_mask(0) == 0
    assert low_mask(32) == MASK32
    with pytest.raises(ValueError):
        low_mask(33)


@pytest.mark.parametrize("value", [v for v in SAMPLES if v])
def test_lowest_set_bit_invariants(value):
    low = lowest_set_bit(value)
    assert popcount(low) == 1
    assert value & low == low
    assert value & (low - 1) == 0
    assert clear_lowest_set_bit(value) == value - low
    assert popcount(clear_lowest_set_bit(value)) == popcount(value) - 1


def test_zero_has_no_set_bits():
    assert lowest_set_bit(0) == 0
    assert clear_lowest_set_bit(0) == 0
    assert popcount(0) == 0
    assert parity(0) == 0


@pytest.mark.parametrize("value", SAMPLES)
def test_popcount_matches_bin_and_parity(value):
    assert popcount(value) == bin32(value).count("1")
    assert parity(value) == popcount(value) % 2


def test_xor_swap():
    assert xor_swap(5, 12) == (12, 5)
    assert xor_swap(7, 7) == (7, 7)


def test_pack_argb_source_example():
    packed = pack_argb(0xFF, 0x80, 0x40, 0x20)
    assert packed == 0xFF804020
    assert unpack_argb(packed) == (0xFF, 0x80, 0x40, 0x20)


@pytest.mark.parametrize("channels", [(0, 0, 0, 0), (1, 2, 3, 4), (255, 255, 255, 255)])
def test_argb_round_trip(channels):
    assert unpack_argb(pack_argb(*channels)) == channels


def test_pack_argb_rejects_wide_channel():
    with pytest.raises(ValueError):
        pack_argb(256, 0, 0, 0)


def test_field_round_trip_keeps_other_bits():
    reg = write_field(0, 0x155, 5, 10)
    assert read_field(reg, 5, 10) == 0x155
    assert reg & ~(low_mask(10) << 5) == 0
    full = write_field(MASK32, 0x155, 5, 10)
    assert read_field(full, 5, 10) == 0x155
    assert full & ~(low_mask(10) << 5) == MASK32 & ~(low_mask(10) << 5)


def test_field_value_truncated_to_width():
    reg = write_field(0, 0x7FF, 5, 10)
    assert read_field(reg, 5, 10) == low_mask(10)
    assert reg >> 15 == 0


def test_field_must_fit_word():
    with pytest.raises(ValueError):
        write_field(0, 1, 30, 4)
    with pytest.raises(ValueError):
        read_field(0, -1, 4)


def test_permission_flags():
    perm = Permission.READ | Permission.WRITE
    assert bin32(perm.value).endswith("011")
    assert bit_is_set(perm.value, 2) is False
    perm |= Permission.EXEC
    assert popcount(perm.value) == 3
    perm &= ~Permission.WRITE
    assert bit_is_set(perm.value, 1) is False
    assert bit_is_set(perm.value, 2) is True
    perm ^= Permission.READ
    assert perm == Permission.EXEC
    assert popcount(perm.value) == 1


def test_register_bank_read_write_set_clear():
    bank = RegisterBank(4)
    bank.write(0x04, 0x40000000)
    assert bank.read(0x04) == 0x40000000
    bank.set_bits(0x04, 1)
    assert bank.read(0x04) == 0x40000000 | 1
    bank.clear_bits(0x04, 0x40000000)
    assert bank.read(0x04) == 1
    assert bank.read(0x00) == 0


def test_register_bank_write_masked_changes_only_masked_bits():
    bank = RegisterBank(2)
    bank.write(0x04, 0x12345678)
    bank.write_masked(0x04, 0x0000FF00, 0x00005500)
    result = bank.read(0x04)
    assert result & ~0x0000FF00 & MASK32 == 0x12345678 & ~0x0000FF00 & MASK32
    assert result & 0x0000FF00 == 0x00005500


def test_register_bank_masks_to_32_bits():
    bank = RegisterBank(1)
    bank.write(0, MASK32 + 1)
    assert bank.read(0) == 0


def test_register_bank_offset_errors():
    bank = RegisterBank(2)
    with pytest.raises(ValueError):
        bank.read(0x02)
    with pytest.raises(IndexError):
        bank.read(0x08)
    with pytest.raises(ValueError):
        RegisterBank(0)


def test_mmio_device_enable_and_ready():
    device = MmioDevice()
    assert device.is_ready() is False
    device.enable()
    ctrl = device.registers.read(REG_CTRL_OFF)
    assert ctrl & (CTRL_ENABLE | CTRL_IRQ_EN) == CTRL_ENABLE | CTRL_IRQ_EN
    device.registers.set_bits(REG_STATUS_OFF, STATUS_READY)
    assert device.is_ready() is True


def test_mmio_device_needs_ctrl_register():
    with pytest.raises(IndexError):
        MmioDevice(RegisterBank(1))