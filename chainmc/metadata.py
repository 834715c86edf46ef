"""Metadata classes recording how a chain was sampled.

Engines and update rules expose a spec property returning one of these, so a
sampling run can be stored next to its results and reproduced later.
"""

from types import SimpleNamespace

from monty.json import MontyDecoder, MSONable, jsanitize


class Metadata(SimpleNamespace, MSONable):
    """A simple namespace holding the specifications of an engine or rule.

    The only field always present is cls_name. Update rules add their own
    settings as keyword fields, i.e. a step size or the rule function names.
    Nested Metadata are serialized as well.
    """

    def __init__(self, cls_name=None, **kwargs):
        """Initialize the namespace.

        Args:
            cls_name (str):
                The name of the class for which specifications are being
                recorded. Has a default so that deepcopy works.
            **kwargs:
                keyword arguments specifications.
        """
        kwargs["cls_name"] = cls_name
        super().__init__(**kwargs)

    def as_dict(self):
        """Return a json serializable dictionary."""
        d = {"@module": self.__class__.__module__, "@class": self.__class__.__name__}
        for k, v in vars(self).items():
            d[k] = v.as_dict() if isinstance(v, MSONable) else jsanitize(v)
        return d

    @classmethod
    def from_dict(cls, d):
        """Initialize from dictionary, recreating any nested MSONables."""
        decoder = MontyDecoder()
        fields = {k: v for k, v in d.items() if not k.startswith("@")}
        return cls(**{k: decoder.process_decoded(v) for k, v in fields.items()})


class EngineMetadata(Metadata):
    """Specifications of a MarkovChainMonteCarlo engine.

    Attributes:
        cls_name (str):
            name of the engine class.
        seed (int):
            seed of the PRNG, None if a generator was set directly and the
            run can not be reproduced from the spec alone.
        burn_in_iterations (int):
            number of updates discarded before recording samples.
        iterations_per_sample (int):
            number of updates between recorded samples.
        max_iterations (int):
            maximum number of samples recorded in a run.
        update_rule (Metadata):
            spec of the update rule.
    """

    def __init__(
        self,
        cls_name=None,
        seed=None,
        burn_in_iterations=0,
        iterations_per_sample=1,
        max_iterations=None,
        update_rule=None,
        **kwargs,
    ):
        """Initialize the engine specifications.

        All arguments have defaults so that deepcopy works, extra keyword
        arguments are kept for engine subclasses recording more settings.
        """
        super().__init__(
            cls_name,
            seed=seed,
            burn_in_iterations=burn_in_iterations,
            iterations_per_sample=iterations_per_sample,
            max_iterations=max_iterations,
            update_rule=update_rule,
            **kwargs,
        )

    @property
    def is_reproducible(self):
        """Check if the recorded settings are enough to replay the run."""
        return self.seed is not None
