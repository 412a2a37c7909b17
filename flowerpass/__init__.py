"""
Flower Password
Copyright (c) 2025

LEGAL NOTICE AND THREAT MODEL:
This tool derives site passwords from a memorized master password. It never
stores per-site passwords and never transmits anything off this device. The
master password is only written to disk when the user explicitly ticks
"Remember", in which case it is stored in a file readable by the owner only.
"""
