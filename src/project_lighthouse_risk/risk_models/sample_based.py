"""
Sample-based disclosure risk models.

These models only use the released sample: the risk of re-identifying a record
is modelled as one over the size of its equivalence class, and a record is
considered unique when it is alone in its equivalence class.
"""

from project_lighthouse_risk.equivalence_classes import EquivalenceClasses


class SampleBasedReidentificationRisk:
    """
    Prosecutor-style re-identification risk estimates from the sample.

    Parameters
    ----------
    classes : EquivalenceClasses
        Partition of the released sample.

    Notes
    -----
    The risk of a record in an equivalence class of size ``f`` is ``1 / f``.
    Highest risk therefore corresponds to the smallest class, lowest risk to the
    largest class, and the average risk over all records is
    ``num_classes / num_records``.
    """

    def __init__(self, classes: EquivalenceClasses) -> None:
        self.classes = classes

    def get_highest_risk(self) -> float:
        return 1.0 / self.classes.min_class_size

    def get_lowest_risk(self) -> float:
        return 1.0 / self.classes.max_class_size

    def get_average_risk(self) -> float:
        return self.classes.num_classes / self.classes.num_records

    def get_fraction_of_tuples_affected_by_highest_risk(self) -> float:
        """
        Fraction of records that are in an equivalence class of the smallest size.

        Returns
        -------
        float
            Value in (0, 1].
        """
        size = self.classes.min_class_size
        return size * self.classes.size_to_count[size] / self.classes.num_records

    def get_fraction_of_tuples_affected_by_lowest_risk(self) -> float:
        """
        Fraction of records that are in an equivalence class of the largest size.

        Returns
        -------
        float
            Value in (0, 1].
        """
        size = self.classes.max_class_size
        return size * self.classes.size_to_count[size] / self.classes.num_records


class SampleBasedUniquenessRisk:
    """
    Uniqueness of records within the sample.

    Parameters
    ----------
    classes : EquivalenceClasses
        Partition of the released sample.
    """

    def __init__(self, classes: EquivalenceClasses) -> None:
        self.classes = classes

    def get_num_unique_tuples(self) -> int:
        return self.classes.num_unique_records

    def get_fraction_of_unique_tuples(self) -> float:
        return self.classes.num_unique_records / self.classes.num_records
