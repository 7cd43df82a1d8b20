from qsredact.cli import app

app(prog_name="qsredact")
