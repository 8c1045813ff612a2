"""
Student Helper: routes student questions to a math solver, a quiz generator,
or a general educational answer.
"""
