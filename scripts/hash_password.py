#!/usr/bin/env python3
"""Print a bcrypt hash for AUTH__ADMIN_PASSWORD_HASH."""

import getpass
import sys

from blog.config import Settings
from blog.util.password import hash_password


def main() -> int:
    """Prompt for the admin password twice and print its hash."""
    settings = Settings()

    password = getpass.getpass("Admin password: ")
    if not password:
        print("Password must not be empty", file=sys.stderr)
        return 1
    if getpass.getpass("Repeat password: ") != password:
        print("Passwords do not match", file=sys.stderr)
        return 1

    print(hash_password(password, rounds=settings.auth.bcrypt_rounds))
    return 0


if __name__ == "__main__":
    sys.exit(main())
