# -*- coding: utf-8 -*-
"""
# OTP generator
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import argparse
import libotpgen
import sys

__all__ = [
	"main",
]

DEMO_SECRET = "JBSWY3DPEHPK3PXP"

def run_selftest():
	libotpgen.HmacEngine.quickSelfTest()
	print("HMAC self test passed (%s)." % libotpgen.HmacEngine.get().name,
	      file=sys.stderr)

def run_demo():
	config = libotpgen.OtpConfig(secret=libotpgen.Secret.fromBase32(DEMO_SECRET),
				     timeStep=30,
				     length=6,
				     algorithm=libotpgen.Algorithm.SHA1)
	generator = libotpgen.OtpGenerator(config)
	print(generator.generateNow())
	return 0

def main(argv=None):
	p = argparse.ArgumentParser(
		description="TOTP code generator demo - "
			    "otpgen version %s" % libotpgen.__version__)
	p.add_argument("-v", "--version", action="store_true",
		       help="show the otpgen version and exit")
	p.add_argument("-s", "--self-test", action="store_true",
		       help="check the HMAC backend against known answers before "
			    "printing the code")
	args = p.parse_args(argv)

	if args.version:
		print("otpgen version %s" % libotpgen.__version__)
		return 0

	try:
		if args.self_test or libotpgen.util.getEnvBool("OTPGEN_SELFTEST"):
			run_selftest()
		return run_demo()
	except libotpgen.ClockError as e:
		print("Clock error: " + str(e), file=sys.stderr)
		return 1
	except libotpgen.OtpGenError as e:
		print("Error: " + str(e), file=sys.stderr)
		return 1

if __name__ == "__main__":
	sys.exit(main())
