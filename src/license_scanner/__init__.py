"""License Scanner Package.

Decodes the AAMVA payload read from the PDF417 barcode on the back of a
North American driver's license or ID card into a structured customer record.
"""

__version__ = "1.0.0"
