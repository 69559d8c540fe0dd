"""HTTP service for the payslip engine."""
