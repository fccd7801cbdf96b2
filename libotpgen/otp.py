# -*- coding: utf-8 -*-
"""
# HOTP/TOTP support
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import ConfigError, OtpError
from libotpgen.hmacengine import Algorithm, hmacDigest
from libotpgen.secret import Secret
from libotpgen.timesource import SystemTimeSource

__all__ = [
	"MIN_DIGITS",
	"MAX_DIGITS",
	"counterFor",
	"counterBytes",
	"truncate",
	"formatCode",
	"hotp",
	"OtpConfig",
	"OtpGenerator",
]

MIN_DIGITS = 1
MAX_DIGITS = 8

def _checkDigits(nrDigits):
	if (not isinstance(nrDigits, int) or isinstance(nrDigits, bool) or
	    not (MIN_DIGITS <= nrDigits <= MAX_DIGITS)):
		raise ConfigError("Invalid number of digits.")
	return nrDigits

def _toSecret(secret):
	if isinstance(secret, Secret):
		return secret
	if isinstance(secret, str):
		return Secret.fromBase32(secret)
	return Secret.fromBytes(secret)

def counterFor(timestamp, timeStep=30):
	"""Get the TOTP counter for a time.
	timestamp: The time in seconds since the Unix epoch.
	timeStep: The number of seconds per counter step.
	Returns floor(timestamp / timeStep).
	"""
	if (not isinstance(timeStep, int) or isinstance(timeStep, bool) or
	    timeStep <= 0):
		raise OtpError("Invalid time step.")
	try:
		if timestamp < 0:
			raise OtpError("Invalid timestamp (before the Unix epoch).")
		return int(timestamp // timeStep)
	except TypeError:
		raise OtpError("Invalid timestamp type.")
	except (ValueError, OverflowError):
		raise OtpError("Invalid timestamp: %r" % (timestamp,))

def counterBytes(counter):
	"""Serialize a HOTP counter to the 8 byte big endian HMAC message.
	"""
	if not isinstance(counter, int) or not (0 <= counter <= (2 ** 64) - 1):
		raise OtpError("Invalid counter.")
	return counter.to_bytes(length=8, byteorder="big", signed=False)

def truncate(digest):
	"""RFC 4226 dynamic truncation.
	Returns the 31 bit integer selected by the low nibble of the last digest byte.
	"""
	if len(digest) < 20:
		raise OtpError("HMAC digest too short for truncation.")
	offset = digest[-1] & 0xF
	hSlice = int.from_bytes(digest[offset:offset+4], byteorder="big", signed=False)
	return hSlice & 0x7FFFFFFF

def formatCode(otpValue, nrDigits=6, grouped=True):
	"""Render an OTP value as a zero padded decimal string.
	If grouped is True, the digits are split into two groups separated
	by a space. The first group has nrDigits // 2 digits.
	"""
	fmt = "%0" + str(nrDigits) + "d"
	code = fmt % otpValue
	if not grouped or nrDigits < 2:
		return code
	split = nrDigits // 2
	return code[:split] + " " + code[split:]

def _otpValue(key, counter, nrDigits, algorithm):
	digest = hmacDigest(algorithm, key, counterBytes(counter))
	return truncate(digest) % (10 ** nrDigits)

def hotp(key, counter, nrDigits=6, algorithm=Algorithm.SHA1):
	"""HOTP - An HMAC-Based One-Time Password Algorithm.
	key: The HOTP key. Either raw bytes, a base32 encoded string or a Secret.
	counter: The HOTP counter integer.
	nrDigits: The number of digits to return. Can be 1 to 8.
	algorithm: The Algorithm or its name string.
	Returns the calculated HOTP token string.
	"""
	key = _toSecret(key).toBytes()
	nrDigits = _checkDigits(nrDigits)
	algorithm = Algorithm.fromName(algorithm)
	otp = _otpValue(key, counter, nrDigits, algorithm)
	return formatCode(otp, nrDigits, grouped=False)

class OtpConfig:
	"""Immutable TOTP configuration.
	secret: The shared secret. A Secret, raw bytes or base32 text.
	timeStep: Seconds per counter step.
	length: The number of code digits. Can be 1 to 8.
	algorithm: The Algorithm or its name string.
	skew: Tolerance window in steps. Reserved for verification,
	      generation does not use it.
	label, url: Optional metadata.
	"""

	__slots__ = (
		"__secret",
		"__timeStep",
		"__length",
		"__algorithm",
		"__skew",
		"__label",
		"__url",
	)

	def __init__(self, secret, timeStep=30, length=6,
		     algorithm=Algorithm.SHA1, skew=0,
		     label=None, url=None):
		if (not isinstance(timeStep, int) or isinstance(timeStep, bool) or
		    timeStep <= 0):
			raise ConfigError("Invalid time step.")
		if not isinstance(skew, int) or isinstance(skew, bool) or skew < 0:
			raise ConfigError("Invalid skew.")
		values = {
			"secret"	: _toSecret(secret),
			"timeStep"	: timeStep,
			"length"	: _checkDigits(length),
			"algorithm"	: Algorithm.fromName(algorithm),
			"skew"		: skew,
			"label"		: label,
			"url"		: url,
		}
		for name, value in values.items():
			object.__setattr__(self, "_OtpConfig__" + name, value)

	@property
	def secret(self):
		return self.__secret.toBytes()

	@property
	def timeStep(self):
		return self.__timeStep

	@property
	def length(self):
		return self.__length

	@property
	def algorithm(self):
		return self.__algorithm

	@property
	def skew(self):
		return self.__skew

	@property
	def label(self):
		return self.__label

	@property
	def url(self):
		return self.__url

	def __setattr__(self, name, value):
		raise AttributeError("OtpConfig is immutable.")

	def __repr__(self):
		return ("OtpConfig(timeStep=%d, length=%d, algorithm=%s, "
			"skew=%d, label=%r)" % (
			self.__timeStep, self.__length, self.__algorithm.value,
			self.__skew, self.__label))

class OtpGenerator:
	"""TOTP - Time-Based One-Time Password Algorithm.
	config: The OtpConfig.
	timeSource: The TimeSource for generateNow().
	            Defaults to the system wall clock.
	"""

	def __init__(self, config, timeSource=None):
		self.__config = config
		self.__timeSource = timeSource or SystemTimeSource()

	@property
	def config(self):
		return self.__config

	def counterFor(self, timestamp):
		return counterFor(timestamp, self.__config.timeStep)

	def generateValue(self, timestamp, key=None):
		"""Calculate the numeric TOTP value for a time.
		timestamp: The time in seconds since the Unix epoch.
		key: Optional key bytes overriding the configured secret.
		"""
		config = self.__config
		if key is None:
			key = config.secret
		else:
			key = _toSecret(key).toBytes()
		return _otpValue(key, self.counterFor(timestamp),
				 config.length, config.algorithm)

	def generate(self, timestamp, key=None, grouped=True):
		"""Calculate the TOTP token string for a time.
		timestamp: The time in seconds since the Unix epoch.
		key: Optional key bytes overriding the configured secret.
		grouped: Split the digits into two space separated groups.
		"""
		return formatCode(self.generateValue(timestamp, key),
				  self.__config.length, grouped)

	def generateNow(self, grouped=True):
		"""Calculate the TOTP token string for the current time.
		"""
		return self.generate(self.__timeSource.now(), grouped=grouped)
