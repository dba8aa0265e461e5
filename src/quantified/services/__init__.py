"""Service layer — operations over Quantified values returning ServiceResult."""
