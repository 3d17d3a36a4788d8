"""User interface widgets: buttons and the status bar."""