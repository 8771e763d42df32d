"""MedFinder: find in-stock medicines at nearby pharmacies."""
