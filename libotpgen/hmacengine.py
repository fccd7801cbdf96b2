# -*- coding: utf-8 -*-
"""
# HMAC wrapper
# Copyright (c) 2023-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import OtpGenError, ConfigError
from libotpgen.util import getEnvChoice

import enum

__all__ = [
	"Algorithm",
	"HmacEngine",
	"hmacDigest",
]

class Algorithm(enum.Enum):
	"""The hash function used inside of the HMAC.
	"""

	SHA1	= "SHA1"
	SHA256	= "SHA256"
	SHA512	= "SHA512"

	@property
	def digestSize(self):
		"""The digest length in bytes.
		"""
		return {
			Algorithm.SHA1		: 160 // 8,
			Algorithm.SHA256	: 256 // 8,
			Algorithm.SHA512	: 512 // 8,
		}[self]

	@classmethod
	def fromName(cls, name):
		"""Get the Algorithm for a name string such as "SHA1" or "sha-256".
		An Algorithm instance is returned unchanged.
		"""
		if isinstance(name, cls):
			return name
		if not isinstance(name, str):
			raise ConfigError("Invalid HMAC hash type.")
		name = name.replace("-", "")
		name = name.replace("_", "")
		name = name.replace(" ", "")
		name = name.upper().strip()
		try:
			return cls(name)
		except ValueError:
			raise ConfigError("Invalid HMAC hash type: %s" % name)

class HmacEngine:
	"""Abstraction layer for the HMAC implementation.
	"""

	__singleton = None

	@classmethod
	def get(cls):
		"""Get the HMAC engine singleton.
		"""
		if cls.__singleton is None:
			cls.__singleton = cls()
		return cls.__singleton

	@classmethod
	def reset(cls):
		"""Drop the singleton, so that the next get()
		selects the backend again.
		"""
		cls.__singleton = None

	def __init__(self, cryptolib=None):
		self.__cryptodome = None
		self.__hashlib = None

		if cryptolib is None:
			cryptolib = getEnvChoice("OTPGEN_CRYPTOLIB")
		cryptolib = cryptolib.lower().strip()

		if cryptolib in ("", "cryptodome"):
			try:
				import Cryptodome.Hash.HMAC
				import Cryptodome.Hash.SHA1
				import Cryptodome.Hash.SHA256
				import Cryptodome.Hash.SHA512
			except ImportError as e:
				raise OtpGenError("Python module import error.\n"
						  "'Cryptodome' is not installed: %s\n"
						  "Install 'pycryptodomex' or set "
						  "OTPGEN_CRYPTOLIB=hashlib." % str(e))
			self.__cryptodome = Cryptodome
			self.__name = "cryptodome"
		elif cryptolib == "hashlib":
			import hashlib
			import hmac
			self.__hashlib = (hashlib, hmac)
			self.__name = "hashlib"
		else:
			raise OtpGenError("'OTPGEN_CRYPTOLIB=%s' is not supported." % cryptolib)

	@property
	def name(self):
		"""The name of the selected backend.
		"""
		return self.__name

	def __cryptodomeHash(self, algorithm):
		Hash = self.__cryptodome.Hash
		return {
			Algorithm.SHA1		: Hash.SHA1,
			Algorithm.SHA256	: Hash.SHA256,
			Algorithm.SHA512	: Hash.SHA512,
		}[algorithm]

	def __hashlibHash(self, algorithm):
		hashlib, _ = self.__hashlib
		return {
			Algorithm.SHA1		: hashlib.sha1,
			Algorithm.SHA256	: hashlib.sha256,
			Algorithm.SHA512	: hashlib.sha512,
		}[algorithm]

	def hmac(self, algorithm, key, message):
		"""Calculate the HMAC of message.
		algorithm: The Algorithm (or its name).
		key: The HMAC key bytes. Any length is allowed.
		message: The message bytes.
		Returns the digest bytes.
		"""
		algorithm = Algorithm.fromName(algorithm)
		try:
			if self.__cryptodome is not None:
				mac = self.__cryptodome.Hash.HMAC.new(
					key=bytes(key),
					msg=bytes(message),
					digestmod=self.__cryptodomeHash(algorithm))
				digest = mac.digest()
			else:
				_, hmac = self.__hashlib
				digest = hmac.new(bytes(key), bytes(message),
						  self.__hashlibHash(algorithm)).digest()
		except Exception as e:
			raise OtpGenError("HMAC error: %s: %s" % (type(e), str(e)))
		if len(digest) != algorithm.digestSize:
			raise OtpGenError("HMAC error: Invalid digest length %d." % len(digest))
		return digest

	@classmethod
	def quickSelfTest(cls):
		inst = cls.get()
		# RFC 2202 test case 2 and RFC 4231 test case 2.
		key = b"Jefe"
		data = b"what do ya want for nothing?"
		expected = {
			Algorithm.SHA1 : "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79",
			Algorithm.SHA256 : "5bdcc146bf60754e6a042426089575c7"
					   "5a003f089d2739839dec58b964ec3843",
			Algorithm.SHA512 : "164b7a7bfcf819e2e395fbe73b56e0a3"
					   "87bd64222e831fd610270cd7ea250554"
					   "9758bf75c05a994a6d034f65f8f0e6fd"
					   "caeab1a34d4a6b4b636e070a38bce737",
		}
		for algorithm, digest in expected.items():
			if inst.hmac(algorithm, key, data) != bytes.fromhex(digest):
				raise OtpGenError("HMAC-%s: Quick self test failed." % (
						  algorithm.value))

def hmacDigest(algorithm, key, message):
	"""Calculate the HMAC of message with the engine singleton.
	"""
	return HmacEngine.get().hmac(algorithm, key, message)
