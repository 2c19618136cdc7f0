from zenloops.main import app

app(prog_name="zenloops")
