"""
NeuroAI Lineage Module

This module implements the Lineage class: the history of an evolutionary run.

Classes:
    Lineage: Append-only sequence of generations
"""

from neuroai.pool.generation import Generation

class Lineage:
    """
    The ordered history of the generations of an evolutionary run.

    A lineage only grows. Appending returns a new Lineage holding copies of
    the appended generations, and every read (indexing, iteration, the
    'generations' property) hands out copies too. A recorded generation
    therefore cannot be modified through the lineage, nor through a reference
    to the generation that was appended. The only change allowed to recorded
    history is set_last_generation_scores(), which also returns a new Lineage.

    Public Properties:
        generations: The recorded generations, oldest first

    Public Methods:
        append(generation):                 Return a lineage extended by one generation
        append_generations(generations):    Return a lineage extended by several generations
        latest_generation():                Return a copy of the most recent generation
        set_last_generation_scores(scores): Return a lineage whose last generation is re-scored
        to_dict():                          Convert the lineage to a dictionary representation

    Class Methods:
        from_dict(lineage_dict): Create a lineage from a dictionary description
    """

    def __init__(self, generations: list[Generation] | None = None):
        self._generations: tuple[Generation, ...] = tuple(g.copy() for g in (generations or []))

    @property
    def generations(self) -> tuple[Generation, ...]:
        """Copies of the recorded generations, oldest first."""
        return tuple(g.copy() for g in self._generations)

    def __len__(self):
        return len(self._generations)

    def __iter__(self):
        return (g.copy() for g in self._generations)

    def __getitem__(self, index: int) -> Generation:
        return self._generations[index].copy()

    def append(self, generation: Generation) -> 'Lineage':
        return self.append_generations([generation])

    def append_generations(self, generations: list[Generation]) -> 'Lineage':
        new_lineage = Lineage()
        new_lineage._generations = self._generations + tuple(g.copy() for g in generations)
        return new_lineage

    def latest_generation(self) -> Generation:
        """
        Returns:
            a copy of the most recent generation, or an empty
            Generation if the lineage has no generations yet
        """
        if not self._generations:
            return Generation()
        return self._generations[-1].copy()

    def set_last_generation_scores(self, scores: list[float]) -> 'Lineage':
        """
        Create a lineage whose most recent generation has new scores (see Generation.set_scores()).
        An empty lineage is returned unchanged.
        """
        if not self._generations:
            return self
        new_lineage = Lineage()
        new_lineage._generations = self._generations[:-1] + (self._generations[-1].set_scores(scores),)
        return new_lineage

    def to_dict(self) -> dict:
        return {"generations": [generation.to_dict() for generation in self._generations]}

    @classmethod
    def from_dict(cls, lineage_dict: dict) -> 'Lineage':
        new_lineage = cls()
        new_lineage._generations = tuple(Generation.from_dict(g) for g in lineage_dict.get("generations", []))
        return new_lineage

    def __eq__(self, other):
        if not isinstance(other, Lineage):
            return NotImplemented
        return self._generations == other._generations
