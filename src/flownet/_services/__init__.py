from ._transport import TransportCore, describe_decoding_error

__all__ = ["TransportCore", "describe_decoding_error"]
