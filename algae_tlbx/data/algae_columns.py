"""Column definitions for the algae bloom (river water quality) dataset."""

from .base_columns import BaseColumn, ColumnMetadata


SEASONS = ("spring", "summer", "autumn", "winter")
RIVER_SIZES = ("small", "medium", "large")
FLOW_SPEEDS = ("low", "medium", "high")


class AlgaeColumn(BaseColumn):
    """Column names for the algae bloom dataset (COIL 1999 competition, as distributed with *Data Mining with R*).

    Columns:
    - ``season``: category - Season of the year in which the sample was collected
    - ``size``: category - Size of the river (small/medium/large)
    - ``speed``: category - Flow speed of the river (low/medium/high)
    - ``mx_ph``: float - Maximum pH value
    - ``mn_o2``: float - Minimum value of O2 (oxygen)
    - ``cl``: float - Mean value of Cl (chloride)
    - ``no3``: float - Mean value of NO3- (nitrates)
    - ``nh4``: float - Mean value of NH4+ (ammonium)
    - ``o_po4``: float - Mean of PO4^3- (orthophosphate)
    - ``po4``: float - Mean of total PO4 (phosphate)
    - ``chla``: float - Mean of chlorophyll
    - ``a1`` .. ``a7``: float - Frequency of seven harmful algae species
    """

    # Target variable
    TARGET = "a1"
    """Frequency of algae species a1 (target variable)."""
    A1 = TARGET

    # Sample descriptors
    SEASON = "season"
    SIZE = "size"
    SPEED = "speed"

    # Chemical measurements
    MX_PH = "mx_ph"
    """Maximum pH value."""
    MN_O2 = "mn_o2"
    """Minimum oxygen concentration."""
    CL = "cl"
    NO3 = "no3"
    NH4 = "nh4"
    O_PO4 = "o_po4"
    PO4 = "po4"
    CHLA = "chla"

    # Remaining algae species
    A2 = "a2"
    A3 = "a3"
    A4 = "a4"
    A5 = "a5"
    A6 = "a6"
    A7 = "a7"

    def metadata(self) -> ColumnMetadata:
        return _COLUMN_METADATA_ALGAE[self]

    @classmethod
    def algae_columns(cls) -> list[str]:
        """Get the seven algae frequency columns ``a1`` .. ``a7``."""
        return [cls.A1, cls.A2, cls.A3, cls.A4, cls.A5, cls.A6, cls.A7]

    @classmethod
    def chemical_columns(cls) -> list[str]:
        """Get the eight chemical measurement columns."""
        return [cls.MX_PH, cls.MN_O2, cls.CL, cls.NO3, cls.NH4, cls.O_PO4, cls.PO4, cls.CHLA]

    @classmethod
    def predictor_columns(cls) -> list[str]:
        """Get the sample descriptors plus chemical measurements (the test-table layout)."""
        return [cls.SEASON, cls.SIZE, cls.SPEED, *cls.chemical_columns()]


def _algae_meta(name: str) -> ColumnMetadata:
    return ColumnMetadata(
        original_name=name,
        cleaned_name=name,
        dtype="float64",
        pretty_name=f"Algae {name}",
    )


_COLUMN_METADATA_ALGAE: dict[AlgaeColumn, ColumnMetadata] = {
    AlgaeColumn.SEASON: ColumnMetadata(
        original_name="season",
        cleaned_name="season",
        dtype="category",
        pretty_name="Season",
        categories=SEASONS,
    ),
    AlgaeColumn.SIZE: ColumnMetadata(
        original_name="size",
        cleaned_name="size",
        dtype="category",
        pretty_name="River Size",
        categories=RIVER_SIZES,
    ),
    AlgaeColumn.SPEED: ColumnMetadata(
        original_name="speed",
        cleaned_name="speed",
        dtype="category",
        pretty_name="River Speed",
        categories=FLOW_SPEEDS,
    ),
    AlgaeColumn.MX_PH: ColumnMetadata(
        original_name="mxPH",
        cleaned_name="mx_ph",
        dtype="float64",
        pretty_name="Maximum pH",
    ),
    AlgaeColumn.MN_O2: ColumnMetadata(
        original_name="mnO2",
        cleaned_name="mn_o2",
        dtype="float64",
        pretty_name="Minimum O2",
    ),
    AlgaeColumn.CL: ColumnMetadata(
        original_name="Cl",
        cleaned_name="cl",
        dtype="float64",
        pretty_name="Chloride (mean)",
    ),
    AlgaeColumn.NO3: ColumnMetadata(
        original_name="NO3",
        cleaned_name="no3",
        dtype="float64",
        pretty_name="Nitrates (mean)",
    ),
    AlgaeColumn.NH4: ColumnMetadata(
        original_name="NH4",
        cleaned_name="nh4",
        dtype="float64",
        pretty_name="Ammonium (mean)",
    ),
    AlgaeColumn.O_PO4: ColumnMetadata(
        original_name="oPO4",
        cleaned_name="o_po4",
        dtype="float64",
        pretty_name="Orthophosphate (mean)",
    ),
    AlgaeColumn.PO4: ColumnMetadata(
        original_name="PO4",
        cleaned_name="po4",
        dtype="float64",
        pretty_name="Total Phosphate (mean)",
    ),
    AlgaeColumn.CHLA: ColumnMetadata(
        original_name="Chla",
        cleaned_name="chla",
        dtype="float64",
        pretty_name="Chlorophyll (mean)",
    ),
    **{AlgaeColumn(name): _algae_meta(name) for name in ("a1", "a2", "a3", "a4", "a5", "a6", "a7")},
}
