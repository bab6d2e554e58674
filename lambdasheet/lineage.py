class Lineage(object):
    """
    Class for tracking the lineage of transformations, and applying them to a given sequence.
    """

    def __init__(self, prior_lineage=None):
        """
        Construct an empty lineage if prior_lineage is None or if its not use it as the list of
        current transformations

        :param prior_lineage: Lineage object to inherit
        :return: new Lineage object
        """
        self.transformations = (
            [] if prior_lineage is None else list(prior_lineage.transformations)
        )

    def __repr__(self):
        """
        Returns readable representation of Lineage

        :return: readable Lineage
        """
        return "Lineage: " + " -> ".join(
            ["sequence"] + [transform.name for transform in self.transformations]
        )

    def __len__(self):
        return len(self.transformations)

    def __getitem__(self, item):
        return self.transformations[item]

    def apply(self, transform):
        """
        Add the transformation to the lineage
        :param transform: Transformation to apply
        """
        self.transformations.append(transform)

    def evaluate(self, sequence):
        """
        Compose the lineage's transformations over sequence. Nothing is computed until the
        returned iterator is consumed.

        :param sequence: Sequence to evaluate on
        :return: iterator over the transformed sequence
        """
        result = sequence
        for transform in self.transformations:
            result = transform.function(result)
        return iter(result)
