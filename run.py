import mdbridge
from mdbridge.config.system_settings import Settings

settings = Settings()
app = mdbridge.create_app(settings)

if __name__ == '__main__':
    print('-'*50)
    print(f'Markdown file bridge {mdbridge.__version__}')
    print(f'http://{settings.HOST}:{settings.PORT}')
    print('-'*50)
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG, threaded=True, use_reloader=settings.DEBUG)
