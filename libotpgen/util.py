# -*- coding: utf-8 -*-
"""
# OTP generator
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import os

__all__ = [
	"str2bool",
	"getEnvChoice",
	"getEnvBool",
]

def str2bool(string, default=False):
	s = string.lower().strip()
	if not s:
		return default
	if s in ("true", "yes", "on", "1"):
		return True
	if s in ("false", "no", "off", "0"):
		return False
	try:
		return bool(int(s))
	except ValueError:
		return default

def getEnvChoice(name, default=""):
	"""Get a normalized (lower case, stripped) environment string.
	"""
	return os.getenv(name, default).lower().strip()

def getEnvBool(name, default=False):
	return str2bool(os.getenv(name, ""), default)
