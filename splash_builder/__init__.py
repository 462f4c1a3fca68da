# splash_builder - generate Cordova splash screens from one source image
__version__ = "0.1.0"
