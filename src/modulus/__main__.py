"""python -m modulus"""

from modulus.app.main import run

run()
