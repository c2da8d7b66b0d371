"""
Simple example using @dataclass and option() from flagparse.

Shows how inline comments become help text and how usage errors end the
program with a message instead of a traceback.

    python examples/greet.py --name world --loud
"""
import sys

from flagparse import Parsable, dataclass, option


@dataclass
class GreetOptions(Parsable):
    """Options of the greeter"""

    name: str | None = option("--name", "-n", required=True)  # who to greet
    greeting: str | None = option("--greeting", "-g", default="Hello")  # what to say
    loud: bool = option("--loud", "-l")                               # shout
    help: bool = option("--help", "-h")                               # show this message


if __name__ == "__main__":
    if {"-h", "--help"} & {arg.lower() for arg in sys.argv[1:]}:
        print(GreetOptions.help_message())
        sys.exit(0)

    options = GreetOptions.parse_args(handle_wrong_arguments=True)
    message = f"{options.greeting}, {options.name}!"
    print(message.upper() if options.loud else message)
