APP_NAME = "dockpin"
