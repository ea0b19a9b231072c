def _confirm_transaction(description: str) -> None:
    """Asks the user to confirm a transaction before it is signed."""
    answer = input(f"Send {description} Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        exit(-1)
