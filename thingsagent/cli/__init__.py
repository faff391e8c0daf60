"""Click command factories, selector rules and app-state waiting for Things."""