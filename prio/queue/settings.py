import os


DEFAULTS = {
    "initial_capacity": 16,
}


class Settings(object):
    """
    First tries to return overrides.attr, if fails, returns defaults.attr.
    """
    def __init__(self, defaults, overrides):
        self._defaults = defaults
        self._overrides = overrides

    def __getattr__(self, item):
        if item in ("_overrides", "_defaults"):
            raise AttributeError(item)
        if item in self._overrides:
            return self._overrides[item]
        try:
            return self._defaults[item]
        except KeyError:
            raise AttributeError(item) from None

    def keys(self):
        return set.union(set(self._defaults), set(self._overrides))

    def __iter__(self):
        return iter(self.keys())

    def __getitem__(self, item):
        return getattr(self, item)

    @classmethod
    def from_environment(cls, prefix="PRIO_QUEUE_", defaults=DEFAULTS,
                         environ=None):
        """
        Builds the settings which take overrides from environment variables.
        :param prefix: Variable name prefix, e.g. PRIO_QUEUE_INITIAL_CAPACITY
        overrides "initial_capacity".
        :param defaults: The default values; only their keys are looked up.
        :param environ: The mapping to read instead of os.environ.
        :return: The new Settings instance.
        """
        if environ is None:
            environ = os.environ
        overrides = {}
        for key in defaults:
            value = environ.get(prefix + key.upper())
            if value is None:
                continue
            try:
                value = int(value)
            except ValueError:
                raise ValueError("%s%s must be an integer (got \"%s\")" % (
                    prefix, key.upper(), value)) from None
            if value < 0:
                raise ValueError("%s%s must not be negative (got %d)" % (
                    prefix, key.upper(), value))
            overrides[key] = value
        return cls(defaults, overrides)


settings = Settings(DEFAULTS, {})
