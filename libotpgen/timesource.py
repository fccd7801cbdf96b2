# -*- coding: utf-8 -*-
"""
# Wall clock access
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import ClockError

import math
import time

__all__ = [
	"TimeSource",
	"SystemTimeSource",
	"FixedTimeSource",
]

class TimeSource:
	"""Supplies the current time as seconds since the Unix epoch.
	"""

	def now(self):
		raise NotImplementedError

class SystemTimeSource(TimeSource):
	"""The operating system wall clock.
	"""

	def now(self):
		try:
			t = time.time()
		except OSError as e:
			raise ClockError("Failed to read the system clock: %s" % str(e))
		if t < 0:
			raise ClockError("System clock is before the Unix epoch.")
		return int(t)

class FixedTimeSource(TimeSource):
	"""A clock pinned to one point in time.
	t: Seconds since the Unix epoch.
	"""

	def __init__(self, t):
		if (not isinstance(t, (int, float)) or isinstance(t, bool) or
		    math.isnan(t)):
			raise ClockError("Invalid time: %r" % (t,))
		if t < 0:
			raise ClockError("Time is before the Unix epoch.")
		self.__t = t

	def now(self):
		return self.__t
