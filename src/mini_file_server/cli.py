from mini_file_server.app.runner import run as api_run


def main():
    try:
        api_run()
    except KeyboardInterrupt:
        # uvicorn re-raises SIGINT once the drain is done
        pass


if __name__ == "__main__":
    main()
