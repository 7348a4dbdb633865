from healthcare_api.main import run

run()
