"""Random output step package."""
