from dhgroup14.crypto import group


def test_modulus_is_2048_bits():
    assert group.MODULUS.bit_length() == 2048
    assert (group.MODULUS.bit_length() + 7) // 8 == group.PUBLIC_KEY_SIZE


def test_modulus_rfc3526_shape():
    # High and low 64 bits are all ones
    assert group.MODULUS >> 1984 == 2 ** 64 - 1
    assert group.MODULUS & (2 ** 64 - 1) == 2 ** 64 - 1
    # p = 23 (mod 24), so 2 generates the prime-order subgroup
    assert group.MODULUS % 24 == 23


def test_exponent_offset():
    assert group.TWO_EXP_256 == 1 << 256
    assert group.EXPONENT_OFFSET == 2 ** 258


def test_sizes():
    assert group.PRIVATE_KEY_SIZE == 32
    assert group.PUBLIC_KEY_SIZE == 256
    assert group.SHARED_KEY_SIZE == 256
    assert group.BLINDING_SIZE == 32
    assert group.GENERATOR == 2
