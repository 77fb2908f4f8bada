from tty_editor.adapters.terminal.app import run

run()
