from todo_clock.app.main import serve

serve()
