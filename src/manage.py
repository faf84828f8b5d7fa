"""ShopSmart database management CLI.

Creates and drops the SQL schema for the domain (a no-op on the in-memory
provider) and bootstraps administrator accounts.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
    PROTEAN_ENV=production python src/manage.py create-admin --email admin@example.com --password ...
"""

import argparse
import sys


def setup_databases():
    """Create database schemas for the domain."""
    from shopsmart.domain import shopsmart
    from shopsmart.utils.db import setup_db

    print("Initializing shopsmart domain...")
    shopsmart.init()
    print("Creating database schema...")
    setup_db(shopsmart)
    print("Done.")


def drop_databases():
    """Drop database schemas for the domain."""
    from shopsmart.domain import shopsmart
    from shopsmart.utils.db import drop_db

    print("Initializing shopsmart domain...")
    shopsmart.init()
    print("Dropping database schema...")
    drop_db(shopsmart)
    print("Done.")


def create_admin(name, email, password, address, phone):
    """Register (or reuse) an account and give it the admin role."""
    from shopsmart.domain import shopsmart
    from shopsmart.identity.account.account import Account, Role
    from shopsmart.identity.account.registration import find_account_by_email, register_account
    from shopsmart.identity.shared.email import normalize_email

    shopsmart.init()
    with shopsmart.domain_context():
        account = find_account_by_email(normalize_email(email))
        if account is None:
            print(f"Registering {email}...")
            account_id = register_account(name=name, email=email, password=password, address=address, phone=phone)
        else:
            account_id = account.id

        repo = shopsmart.repository_for(Account)
        account = repo.get(account_id)
        if not account.is_admin:
            account.change_role(Role.ADMIN.value, changed_by=account.id)
            repo.add(account)
    print(f"  {email} is an admin.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="ShopSmart database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Create an administrator account")
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)
    admin_parser.add_argument("--name", default="Administrator")
    admin_parser.add_argument("--address", default="Head Office")
    admin_parser.add_argument("--phone", default="000-0000")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    elif args.command == "create-admin":
        create_admin(args.name, args.email, args.password, args.address, args.phone)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
