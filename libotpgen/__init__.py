# -*- coding: utf-8 -*-

import sys
if sys.version_info[0:2] < (3, 7):
	raise Exception("otpgen requires Python >=3.7")
del sys

import libotpgen.exception
import libotpgen.hmacengine
import libotpgen.otp
import libotpgen.secret
import libotpgen.timesource
import libotpgen.util
import libotpgen.version

from libotpgen.exception import *
from libotpgen.hmacengine import *
from libotpgen.otp import *
from libotpgen.secret import *
from libotpgen.timesource import *
from libotpgen.version import *

__version__ = VERSION_STRING
