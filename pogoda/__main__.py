from pogoda.cli import main_entry

main_entry()
