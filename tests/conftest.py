"""
Pytest fixtures and configuration for Branding Token Check tests.
"""

import pytest
from pathlib import Path

from branding_token_check.token_checker import BrandingTokenChecker


@pytest.fixture
def checker() -> BrandingTokenChecker:
    """Checker with the default sensitivity (0.2)."""
    return BrandingTokenChecker()


@pytest.fixture
def sample_resources_csv(tmp_path: Path) -> Path:
    """Create a sample resource CSV file."""
    csv_path = tmp_path / "resources.csv"
    csv_content = """resource_id,source,target,language
IDS_OPEN,Open with (!Word_Full),Ouvrir avec (!Word_Full),fr-FR
IDS_SAVE,Save to (!idspnOneDrive),Speichern in idspnOneDrive),de-DE
IDS_APP,Welcome to (!ApplicationName),Bienvenue dans (!ApplicaionName),fr-FR
IDS_PLAIN,Cancel,Annuler,fr-FR
IDS_DROP,(!idftCOUNT) of (!idftSUM),(!idftCOUNT),ja-JP
"""
    csv_path.write_text(csv_content, encoding="utf-8")
    return csv_path


@pytest.fixture
def sample_resources_excel(tmp_path: Path) -> Path:
    """Create a sample resource Excel file."""
    import pandas as pd

    xlsx_path = tmp_path / "resources.xlsx"
    data = {
        "ID": ["IDS_ONE", "IDS_TWO"],
        "Source String": ["Start (!Word_Full_2010)", "Use (!Excel_Short)"],
        "Translation": ["Démarrer (!Word_Full_2010)", "Utiliser (!Excel_Short)"],
        "Culture": ["fr-FR", "fr-FR"],
    }
    df = pd.DataFrame(data)
    df.to_excel(xlsx_path, index=False)
    return xlsx_path
