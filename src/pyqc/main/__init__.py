import abc


class Command(abc.ABC):
    """Base command class.

    Concrete commands define a name, which is used as the name of their
    sub-command on the command line. Commands without a name (such as
    shared base classes) are not registered.
    """

    name = None

    @abc.abstractmethod
    def configure(self, parser):
        """Configures the argument parser for the command."""
        pass

    @abc.abstractmethod
    def run(self, args):
        """Runs the command."""
        pass

    def register(self, subparsers):
        """Adds a sub-parser for the command to subparsers."""

        parser = subparsers.add_parser(self.name, help=self.__doc__)
        self.configure(parser)
        parser.set_defaults(command=self)

        return parser

    @classmethod
    def available_commands(cls):
        """Returns dict of available commands, keyed by name."""

        return {
            class_.name: class_()
            for class_ in cls._get_subclasses() if class_.name is not None
        }

    @classmethod
    def _get_subclasses(cls):
        for subclass in cls.__subclasses__():
            yield from subclass._get_subclasses()
            yield subclass
