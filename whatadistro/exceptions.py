class Fail(BaseException):
    """
    Failure that makes whatadistro exit with an error message and status 1.

    No stack trace is printed.
    """
