"""
Invalid input to any of the keying functions. There is only the one kind of
error: it is always a caller bug, never something to retry.
"""


class InvalidArgument(ValueError):
    """
    Raised before any computation when an argument is absent, empty or
    out of range.

    procname - public function that rejected the input
    value    - the sentinel output (0, False or (False,0)) the function
               stands for when it fails
    """
    def __init__(self, msg, procname, value=0):
        self.msg = msg
        self.procname = procname
        self.value = value
        super().__init__('Error in %s: %s'%(procname, msg))


def report_error(msg, procname, value=0, log=None):
    """
    Write the error to log (if given) and raise InvalidArgument
    """
    err = InvalidArgument(msg, procname, value)
    if log is not None:
        print(str(err), file=log)
    raise err
