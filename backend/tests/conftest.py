import pytest

from app.core.validation import HSNCatalog, HSNValidationEngine


HORSES_CATALOG = {
    "01": "Live animals",
    "0101": "Horses",
    "010121": "Horses (pure-bred)",
    "01012100": "Horses (pure-bred breeding)",
}


@pytest.fixture
def horses_catalog():
    return HSNCatalog(HORSES_CATALOG, source="test")


@pytest.fixture
def engine():
    return HSNValidationEngine(HORSES_CATALOG, source_name="test")


@pytest.fixture
def hierarchy_engine():
    """Catalog with the heading 0101 missing but its tariff item present."""
    catalog = {k: v for k, v in HORSES_CATALOG.items() if k != "0101"}
    return HSNValidationEngine(catalog, source_name="test", hierarchy_check=True)


@pytest.fixture
def catalog_csv(tmp_path):
    path = tmp_path / "hsn_master.csv"
    path.write_text(
        "HSN Code,Description\n"
        "01,Live animals\n"
        '0101,"Live horses, asses, mules and hinnies"\n'
        " 010121 , Horses: pure-bred breeding animals \n"
        "01012100,Horses: pure-bred breeding animals\n"
        ",Orphan description\n"
        "0102,\n",
        encoding="utf-8",
    )
    return path
