import sys

from .errors import ArithError

class Reporter():
    """
    collect errors, print them on a checkpoint or a crash
    """
    def __init__(self, source = None):
        self.source  = source
        self.errors  = []
        self.section = None

    def crash(self, errstr):
        print("=== Error backlog ===", file=sys.stderr)

        for err in self.errors:
            print(f"[ Error ] {err}", file=sys.stderr)

        errstr = f"{{{self.section}}} \t| " + errstr if self.section else errstr
        print(f"[ Fatal Error ] | {errstr}", file=sys.stderr)

        sys.exit(1)

    def log(self, error):
        match error:
            case ArithError(offset = None):
                self.errors.append(self.tag(error.message))
            case ArithError():
                self.errors.append(self.tag(error.pprint()) + self.underline(error))
            case _:
                self.errors.append(self.tag(str(error)))

    def tag(self, errstr):
        return f"{{{self.section}}} \t| " + errstr if self.section else errstr

    def underline(self, error):
        """
        source line of the error with carets under its span,
        empty if the reporter has no source
        """
        if self.source is None:
            return ""

        offset  = min(error.offset, len(self.source))
        start   = self.source.rfind("\n", 0, offset) + 1
        end     = self.source.find("\n", offset)
        end     = len(self.source) if end < 0 else end

        carets  = "^" * max(1, min(error.length, end - offset))
        return f"\n\t{self.source[start:end]}\n\t{' ' * (offset - start)}{carets}"

    def checkpoint(self, section = None):
        if self.errors:
            self.crash("error backlog at checkpoint")

        self.section = section

    def __bool__(self):
        return len(self.errors) != 0
