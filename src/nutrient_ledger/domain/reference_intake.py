"""Population-default recommended daily intake values."""

ENERGY_KCAL = "Energy kcal"
PROTEIN = "Protein"
TOTAL_FAT = "Total lipid (fat)"
SATURATED_FAT = "Fatty acids, total saturated"
UNSATURATED_FAT = "Fatty acids, total polyunsaturated"
CARBOHYDRATE = "Carbohydrate, by difference"

PERSONALIZED_NUTRIENTS = (
    ENERGY_KCAL,
    PROTEIN,
    TOTAL_FAT,
    SATURATED_FAT,
    UNSATURATED_FAT,
    CARBOHYDRATE,
)

# None marks nutrients without an established population default.
_PROXIMATES: dict[str, float | None] = {
    "Water": 3700.0,
    ENERGY_KCAL: None,
    PROTEIN: None,
    TOTAL_FAT: None,
    CARBOHYDRATE: None,
    "Fiber, total dietary": 38.0,
    "Total Sugars": 50.0,
    "Ash": None,
}

_MINERALS: dict[str, float | None] = {
    "Calcium, Ca": 1300.0,
    "Iron, Fe": 18.0,
    "Magnesium, Mg": 420.0,
    "Phosphorus, P": 700.0,
    "Potassium, K": 4700.0,
    "Sodium, Na": 2300.0,
    "Zinc, Zn": 11.0,
    "Copper, Cu": 0.9,
    "Manganese, Mn": 2.3,
    "Selenium, Se": 55.0,
    "Fluoride, F": 4.0,
}

_VITAMINS: dict[str, float | None] = {
    "Vitamin C, total ascorbic acid": 90.0,
    "Thiamin": 1.2,
    "Riboflavin": 1.3,
    "Niacin": 16.0,
    "Pantothenic acid": 5.0,
    "Vitamin B-6": 1.3,
    "Folate, total": 400.0,
    "Folic acid": 400.0,
    "Folate, food": 400.0,
    "Folate, DFE": 400.0,
    "Choline, total": 550.0,
    "Vitamin B-12": 2.4,
    "Vitamin B-12, added": None,
    "Vitamin A, RAE": 900.0,
    "Retinol": 900.0,
    "Carotene, beta": None,
    "Carotene, alpha": None,
    "Cryptoxanthin, beta": None,
    "Vitamin A, IU": 3000.0,
    "Lycopene": None,
    "Lutein + zeaxanthin": None,
    "Vitamin E (alpha-tocopherol)": 15.0,
    "Vitamin E, added": None,
    "Vitamin D (D2 + D3), International Units": 800.0,
    "Vitamin D (D2 + D3)": 20.0,
    "Vitamin K (phylloquinone)": 120.0,
    "Vitamin K (Dihydrophylloquinone)": None,
}

_LIPIDS: dict[str, float | None] = {
    SATURATED_FAT: None,
    "SFA 4:0": None,
    "SFA 6:0": None,
    "SFA 8:0": None,
    "SFA 10:0": None,
    "SFA 12:0": None,
    "SFA 14:0": None,
    "SFA 16:0": None,
    "SFA 18:0": None,
    "Fatty acids, total monounsaturated": None,
    "MUFA 16:1": None,
    "MUFA 18:1": None,
    "MUFA 20:1": None,
    "MUFA 22:1": None,
    UNSATURATED_FAT: None,
    "PUFA 18:2": None,
    "PUFA 18:3": 1.6,
    "PUFA 18:4": None,
    "PUFA 20:4": None,
    "PUFA 20:5 n-3 (EPA)": None,
    "PUFA 22:5 n-3 (DPA)": None,
    "PUFA 22:6 n-3 (DHA)": None,
    "Fatty acids, total trans": None,
    "Cholesterol": 300.0,
}

_AMINO_ACIDS: dict[str, float | None] = {
    "Tryptophan": 280.0,
    "Threonine": 1050.0,
    "Isoleucine": 1400.0,
    "Leucine": 2730.0,
    "Lysine": 2100.0,
    "Methionine": 728.0,
    "Cystine": 287.0,
    "Phenylalanine": 875.0,
    "Tyrosine": 875.0,
    "Valine": 1820.0,
    "Arginine": None,
    "Histidine": 700.0,
    "Alanine": None,
    "Aspartic acid": None,
    "Glutamic acid": None,
    "Glycine": None,
    "Proline": None,
    "Serine": None,
}

_OTHER: dict[str, float | None] = {
    "Alcohol, ethyl": None,
    "Caffeine": 400.0,
    "Theobromine": None,
    "Sucrose": None,
    "Glucose": None,
    "Fructose": None,
    "Lactose": None,
    "Maltose": None,
    "Galactose": None,
    "Starch": None,
    "Betaine": None,
    "Tocopherol, beta": None,
    "Tocopherol, gamma": None,
    "Tocopherol, delta": None,
    "Tocotrienol, alpha": None,
    "Tocotrienol, beta": None,
    "Tocotrienol, gamma": None,
    "Tocotrienol, delta": None,
    "Phytosterols": None,
}


def reference_intake() -> dict[str, float | None]:
    """Return a fresh copy of the default recommended daily intake table."""
    table: dict[str, float | None] = {}
    for group in (_PROXIMATES, _MINERALS, _VITAMINS, _LIPIDS, _AMINO_ACIDS, _OTHER):
        table.update(group)
    return table
