import pytest

from linkcheck.crc import CrcError, crc_remainder, encode, verify


def test_textbook_remainder():
    assert crc_remainder("1101011011", "10011") == "1110"


def test_textbook_codeword():
    assert encode("1101011011", "10011") == "11010110111110"


@pytest.mark.parametrize(
    "data, generator",
    [("1101011011", "10011"), ("100100", "1101"), ("0", "11"), ("", "1011"), ("1111", "1")],
)
def test_round_trip(data, generator):
    codeword = encode(data, generator)
    assert len(codeword) == len(data) + len(generator) - 1
    assert verify(codeword, generator) == data


def test_single_bit_errors_detected():
    generator = "10011"
    codeword = encode("1101011011", generator)
    for i, bit in enumerate(codeword):
        flipped = codeword[:i] + ("0" if bit == "1" else "1") + codeword[i + 1:]
        with pytest.raises(CrcError):
            verify(flipped, generator)


def test_remainder_length_follows_generator():
    assert len(crc_remainder("1010101", "110101")) == 5
    assert crc_remainder("1010", "1") == ""


def test_empty_generator_rejected():
    with pytest.raises(CrcError):
        crc_remainder("1010", "")


def test_non_binary_rejected():
    with pytest.raises(CrcError):
        encode("10a1", "101")
    with pytest.raises(CrcError):
        verify("1011", "1x1")


def test_codeword_too_short():
    with pytest.raises(CrcError):
        verify("1", "10011")


def test_crc_error_is_value_error():
    with pytest.raises(ValueError):
        verify("11010110111111", "10011")