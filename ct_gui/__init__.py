"""PySide6 render surface for the CRM data table."""
