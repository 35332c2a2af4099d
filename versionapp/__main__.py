from versionapp.main import run

run()
