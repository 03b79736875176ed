"""
Core domain models, wire codecs, and contracts.

This module contains the order packet format: the Order and PacketHeader
models, the binary Header/Batch codecs, and the JSON contract of a decoded
packet. Nothing here performs I/O.
"""
