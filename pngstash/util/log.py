import sys


def log_stderr(*a, **kw):
    print(*a, file=sys.stderr, **kw)


def log_stdout(*a, **kw):
    print(*a, **kw)


def fail_hard(*a, status=1, **kw):
    ''' Log the message, if any, to stderr and exit with the given status '''
    if a:
        log_stderr(*a, **kw)
    sys.exit(status)


def fail_with_exception(path, e):
    ''' Report an error that stopped us from handling the file at path '''
    fail_hard('{}: {}'.format(path, e))
