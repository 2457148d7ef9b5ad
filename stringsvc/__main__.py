from stringsvc.main import run

run()
