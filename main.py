# main.py
from editopia.app import main


# --- запуск ---
if __name__ == "__main__":
    main()
