import typing as t

# CRC-CCITT polynomial (XMODEM variant, initial value 0)
POLY = 0x1021


def _build_table() -> t.Tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ POLY) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
        table.append(crc)
    return tuple(table)


CRC16_TABLE = _build_table()


def crc16(data: t.Union[bytes, bytearray]) -> int:
    """Compute the 16 bits checksum of some bytes.

    Bytes are folded left to right, so the version byte must come first.
    """
    crc = 0
    for byte in data:
        crc = CRC16_TABLE[byte ^ (crc >> 8)] ^ ((crc << 8) & 0xFFFF)
    return crc
