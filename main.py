import dotenv

dotenv.load_dotenv()

from webinar_formatter.server import main


if __name__ == "__main__":
    main()
