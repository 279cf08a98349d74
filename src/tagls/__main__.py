from tagls.cli import app

app(prog_name="tagls")
