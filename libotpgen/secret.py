# -*- coding: utf-8 -*-
"""
# OTP shared secret and base32 codec
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import DecodeError, ConfigError

from base64 import b32decode, b32encode
import binascii
import re

__all__ = [
	"b32decodeSecret",
	"b32encodeSecret",
	"Secret",
]

# Unpadded base32 lengths that no byte sequence can produce.
_INVALID_LENGTHS = (1, 3, 6)

_B32_RE = re.compile(r"[A-Za-z2-7]*")

def b32decodeSecret(text):
	"""Decode an RFC 4648 base32 secret string to bytes.
	text: The base32 string. Padding is optional, case is ignored.
	Returns the raw secret bytes.
	Raises DecodeError on invalid characters or invalid length.
	"""
	if not isinstance(text, str):
		raise DecodeError("Base32 secret must be a string.")
	text = text.strip().rstrip("=")
	# Check before upper(), which maps some non-ASCII letters to ASCII.
	if not _B32_RE.fullmatch(text):
		raise DecodeError("Base32 secret contains invalid characters.")
	text = text.upper()
	if len(text) % 8 in _INVALID_LENGTHS:
		raise DecodeError("Base32 secret has an invalid length (%d)." % len(text))
	padding = "=" * ((8 - (len(text) % 8)) % 8)
	try:
		return b32decode((text + padding).encode("ASCII"))
	except (binascii.Error, UnicodeError) as e:
		raise DecodeError("Invalid base32 secret: %s" % str(e))

def b32encodeSecret(data):
	"""Encode raw secret bytes to the canonical (upper case, unpadded)
	base32 representation.
	"""
	return b32encode(bytes(data)).decode("ASCII").rstrip("=")

class Secret:
	"""An OTP shared secret.
	The secret is held either in its base32 encoded text form (ENCODED)
	or as raw bytes (RAW). Use fromBase32() or fromBytes() to construct it.
	Both forms canonicalize to the same bytes via toBytes().
	"""

	ENCODED	= "encoded"
	RAW	= "raw"

	__slots__ = (
		"__kind",
		"__data",
	)

	def __init__(self, kind, data):
		object.__setattr__(self, "_Secret__kind", kind)
		object.__setattr__(self, "_Secret__data", data)

	@classmethod
	def fromBase32(cls, text):
		"""Create a secret from its base32 text.
		The text is validated immediately.
		"""
		return cls(cls.ENCODED, b32decodeSecret(text))

	@classmethod
	def fromBytes(cls, data):
		"""Create a secret from raw key bytes.
		"""
		if not isinstance(data, (bytes, bytearray, memoryview)):
			raise ConfigError("Raw secret must be bytes, not %s." % (
					  type(data).__name__))
		return cls(cls.RAW, bytes(data))

	@property
	def kind(self):
		return self.__kind

	def toBytes(self):
		"""Get the canonical raw secret bytes.
		"""
		return self.__data

	def encode(self):
		"""Get the canonical base32 text of this secret.
		"""
		return b32encodeSecret(self.__data)

	def __setattr__(self, name, value):
		raise AttributeError("Secret is immutable.")

	def __eq__(self, other):
		if not isinstance(other, Secret):
			return NotImplemented
		return self.__data == other.__data

	def __hash__(self):
		return hash(self.__data)

	def __len__(self):
		return len(self.__data)

	def __repr__(self):
		# Never show the key material.
		return "Secret(kind=%s, length=%d)" % (self.__kind, len(self.__data))
