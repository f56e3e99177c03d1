# Club assistant: grounded chat and structured generation over the club database.
