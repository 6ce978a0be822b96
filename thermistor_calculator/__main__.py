from thermistor_calculator.main import run

run()
