import logging
import os
import sys

from tabulate import tabulate

from config.settings import Settings
from src.models.account import BankAccount

logger = logging.getLogger('sample_runner')

OPERATIONS = ('deposit', 'withdraw')
DEFAULT_STEPS = ('deposit:25', 'withdraw:30')


def configure_logging(settings):
    root = logging.getLogger()
    root.setLevel(settings.log_level)
    log_path = os.path.abspath(settings.log_file)
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
            return handler
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    root.addHandler(handler)
    return handler


def parse_steps(args):
    """Turn 'deposit:25' style tokens into (operation, amount) pairs."""
    steps = []
    for token in args:
        op, sep, raw = token.partition(':')
        if not sep or op not in OPERATIONS:
            raise ValueError(f"Invalid step {token!r}, expected deposit:<amount> or withdraw:<amount>")
        try:
            amount = float(raw)
        except ValueError:
            raise ValueError(f"Invalid amount in step {token!r}") from None
        steps.append((op, amount))
    return steps


def run(account, steps):
    """Apply each step to the account and record what happened."""
    rows = []
    for op, amount in steps:
        if op not in OPERATIONS:
            raise ValueError(f"Unknown operation {op!r}")
        before = account.balance
        # withdraw ignores an overdraft, so check before applying
        applied = op == 'deposit' or account.can_withdraw(amount)
        getattr(account, op)(amount)
        after = account.balance
        rows.append([op, amount, before, after, applied])
        logger.info('%s %s: %s -> %s', op, amount, before, after)
    return rows


def render(rows):
    return tabulate(rows, headers=['Operation', 'Amount', 'Before', 'After', 'Applied'], floatfmt='.2f')


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = Settings.load()
    except ValueError as err:
        print(err, file=sys.stderr)
        return 2
    configure_logging(settings)

    try:
        steps = parse_steps(args or DEFAULT_STEPS)
    except ValueError as err:
        logger.error(err)
        print(err, file=sys.stderr)
        return 2

    account = BankAccount.from_settings(settings)
    print(f'Account {account.account_number} ({account.account_holder_name})')
    print(render(run(account, steps)))
    print(f'Final balance: {account.balance:.2f}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
