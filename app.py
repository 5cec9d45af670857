from film_catalog import create_app

# flask --app app run / flask --app app init-db
app = create_app()

if __name__ == "__main__":
    app.run()
