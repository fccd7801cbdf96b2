# -*- coding: utf-8 -*-
"""
# OTP generator exceptions
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

__all__ = [
	"OtpGenError",
	"DecodeError",
	"ConfigError",
	"ClockError",
	"OtpError",
]

class OtpGenError(Exception):
	"""Main otpgen exception.
	"""

class DecodeError(OtpGenError):
	"""Invalid base32 secret text.
	"""

class ConfigError(OtpGenError):
	"""Invalid OTP configuration.
	"""

class ClockError(OtpGenError):
	"""The wall clock could not be read.
	"""

class OtpError(OtpGenError):
	"""HOTP/TOTP exception.
	"""
