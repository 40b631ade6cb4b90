from treegen.ui.cli import app

app(prog_name="treegen")
